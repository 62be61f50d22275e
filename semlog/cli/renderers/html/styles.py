# semlog/cli/renderers/html/styles.py
"""
CSS for the HTML tree view
"""


def get_css() -> str:
    """Get CSS styles for the standalone tree page"""
    return """
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: "SF Mono", Menlo, Consolas, "Courier New", monospace;
            font-size: 0.85rem;
            line-height: 1.6;
            color: #1f2937;
            background: #f3f4f6;
            padding: 2rem;
        }

        .container {
            max-width: 1100px;
            margin: 0 auto;
            background: white;
            border: 1px solid #e5e7eb;
            box-shadow: 0 0 20px rgba(0,0,0,0.05);
            padding: 1.5rem 2rem;
        }

        .doc-header {
            border-bottom: 2px solid #111827;
            padding-bottom: 0.75rem;
            margin-bottom: 1rem;
        }

        .doc-title {
            font-size: 1.25rem;
            font-weight: 700;
        }

        .doc-meta {
            color: #6b7280;
            font-size: 0.75rem;
        }

        /* Tree */
        .semantic-tree details {
            margin-left: 1.25rem;
            border-left: 1px dashed #d1d5db;
            padding-left: 0.5rem;
        }

        .semantic-tree > details {
            margin-left: 0;
            border-left: none;
        }

        .semantic-tree summary {
            cursor: pointer;
            list-style: none;
        }

        .semantic-tree summary::before {
            content: "▸ ";
            color: #9ca3af;
        }

        .semantic-tree details[open] > summary::before {
            content: "▾ ";
        }

        .tree-leaf {
            margin-left: 1.25rem;
            padding-left: 0.5rem;
            border-left: 1px dashed #d1d5db;
        }

        .node-type {
            font-weight: 700;
            color: #1d4ed8;
        }

        .node-type.event {
            color: #7c3aed;
        }

        .node-info {
            color: #374151;
        }

        .timing {
            color: #059669;
            margin-left: 0.25rem;
        }

        .timing.slow {
            color: #dc2626;
            font-weight: 700;
        }

        .collapsed .timing {
            color: #9ca3af;
        }

        .node-context {
            margin: 0.25rem 0 0.5rem 1.25rem;
            padding: 0.5rem;
            background: #f9fafb;
            border: 1px solid #e5e7eb;
            font-size: 0.75rem;
            white-space: pre-wrap;
            word-break: break-all;
        }
    """
