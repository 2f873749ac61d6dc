# ghsync/logging/tags.py
"""
Subsystem tags prefixed to log lines.

Changing a tag here updates it project-wide.
"""

IMPORT = "[IMPORT]"
REMOTE = "[REMOTE]"
STORE = "[STORE]"
HOOKS = "[HOOKS]"
EXPORT = "[EXPORT]"
WEBHOOK = "[WEBHOOK]"
