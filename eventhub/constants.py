PACKAGE_NAME = "eventhub"

# Section of the ini file that holds hub settings
CONFIG_SECTION = "EVENTHUB"

LOG_FILE_MAX_BYTES = 10 * 1024**2
LOG_FILE_BACKUP_COUNT = 5
