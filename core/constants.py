"""Fixed names shared by the resolver, settings layer and desktop shell."""

SETTINGS_CPY_SECTION = "cpy-manager"
PROFILES_SETTING_KEY = "profiles"

COBOL_CBL_EXT = ".CBL"
COBOL_COB_EXT = ".COB"
COBOL_COBOL_EXT = ".COBOL"
PROGRAM_EXTENSIONS = (COBOL_CBL_EXT, COBOL_COB_EXT, COBOL_COBOL_EXT)

INDICATOR_PREFIX = "CPY profile: "
DEFAULT_STATUS_TEXT = INDICATOR_PREFIX + "undefined"
CHANGE_PROFILE_COMMAND = "cobol-lsp.cpy-manager.change-default-zowe-profile"

PICKER_PLACEHOLDER = "Select a zowe profile to search for copybooks"
