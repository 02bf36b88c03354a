# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "Title shown above the list and in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKLIST_DATA_DIR": "Local directory for tasklist.log (default: .local/tasklist).",
    # Demo content
    "TASKLIST_SEED_DEMO": "Insert demo tasks at start-up (true/false, default: false).",
    "TASKLIST_SEED_TASKS": "Semicolon separated demo task names (default: built-in list).",
    # Console
    "TASKLIST_CONSOLE_TIMESTAMPS": "Prefix console notices with local time (true/false, default: true).",
}
