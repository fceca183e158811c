# Validation (1000-1999)
UNRECOGNIZED_MESSAGE_TYPE = 1001
MISSING_MESSAGE_PAYLOAD = 1002

# Authorization (3000-3999)
WEBHOOK_VERIFICATION_FAILED = 3001

# Authentication (4000-4999)
MISSING_SIGNATURE = 4001
MALFORMED_SIGNATURE = 4002
INVALID_SIGNATURE = 4003

# Configuration (7000-7999)
MISSING_APP_SECRET = 7001

# Internal (8000-8999)
MALFORMED_NOTIFICATION = 8001
