"""Constants for specform"""

# ==================== File Paths ====================
CONFIG_PATH_DEFAULT = "specform.toml"
LOG_FILE_DEFAULT = "data/specform.log"

# ==================== Schema Keywords ====================
KEY_PROPERTIES = "properties"
KEY_REQUIRED = "required"
KEY_GROUPS = "groups"
KEY_ONE_OF = "oneOf"
KEY_ITEMS = "items"
KEY_CONST = "const"
KEY_HIDDEN = "airbyte_hidden"
KEY_SECRET = "airbyte_secret"
KEY_CONNECTION_SPECIFICATION = "connectionSpecification"

TYPE_OBJECT = "object"
TYPE_ARRAY = "array"
TYPE_STRING = "string"

# ==================== Form Defaults ====================
DEFAULT_GROUP_ID = "default"
DEFAULT_ITEM_TYPE = TYPE_STRING
DEFAULT_LEAF_TYPE = TYPE_STRING
DEFAULT_DISPLAY_TYPE = "dropdown"

# Path segment standing in for "any element" of an array of objects
ARRAY_INDEX_SEGMENT = "0"
PATH_SEPARATOR = "."

# ==================== Web ====================
WEB_HOST_DEFAULT = "127.0.0.1"
WEB_PORT_DEFAULT = 5000
