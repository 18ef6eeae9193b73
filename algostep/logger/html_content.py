CSS_LOG = """
/* Base styles */
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
    background: #1e1e1e;
    color: #e0e0e0;
}

.section {
    margin: 1.5em 0;
    padding: 1em;
    background: #2d2d2d;
    border-radius: 4px;
}

.info { color: #e0e0e0; }
.warning { color: #ffcc66; }
.error { color: #ff8080; }

.result {
    margin: 0.5em 0;
    padding: 0.5em;
    border-left: 3px solid #4ec9b0;
}

.step-terminal td {
    font-weight: bold;
    color: #4ec9b0;
}

table {
    border-collapse: collapse;
}

th, td {
    padding: 4px 12px;
    border: 1px solid #3a3a3a;
}
"""
