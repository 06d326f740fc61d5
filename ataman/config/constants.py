"""
Centralized constants for Ataman.

Everything the rc file layer needs to know about names, locations and the
template written for new users lives here.
"""

# =============================================================================
# RC FILE LOCATION
# =============================================================================

ATAMAN_RC_FILENAME = ".atamanrc.config"

# Overrides the rc file location (defaults to ~/.atamanrc.config)
ATAMAN_RC_PATH_ENV = "ATAMAN_RC_PATH"

# Opt-in diagnostics log file; nothing besides the rc file is written otherwise
ATAMAN_LOG_FILE_ENV = "ATAMAN_LOG_FILE"

# =============================================================================
# CONFIG KEYWORDS
# =============================================================================

APPEARANCE_KEYWORD = "appearance"
TITLE_KEYWORD = "title"
BINDINGS_KEYWORD = "bindings"
DESCRIPTION_KEYWORD = "description"
ACTION_ID_KEYWORD = "actionId"

APPEARANCE_TITLE_PATH = f"{APPEARANCE_KEYWORD}.{TITLE_KEYWORD}"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_TITLE = "Ataman"

# Title used on every user-visible notification
NOTIFICATION_TITLE = "Ataman"

# Written verbatim when no rc file exists yet
RC_TEMPLATE = """appearance {
    title: Ataman
}
bindings {
    q {
        description: Session...
        bindings {
             f { actionId: OpenAtamanConfigAction, description: Open ~/.atamanrc.config }
        }
    },
}
"""
