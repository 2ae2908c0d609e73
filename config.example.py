# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: pocket-todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Also write full DEBUG logs to <log_dir>/todo.log (true/false).",
    "TODO_LOG_DIR": "Log directory (default: .local/todo).",
    # Presentation
    "TODO_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TODO_DARK_MODE": "Start in dark mode (true/false, default: false).",
    # Store policy
    "TODO_STRICT_EDIT": "Trim edits and reject empty ones like adds (true/false, default: false).",
}
