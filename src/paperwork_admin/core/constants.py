"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DOCUMENT_ID_PREFIX = "DOC"
FILE_ID_PREFIX = "FILE"
CUSTOMER_ID_PREFIX = "CUST"
BUILDER_ID_PREFIX = "BLD"

DOCUMENT_SEQUENCE_WIDTH = 3
DIRECTORY_ID_WIDTH = 3

# Placeholders for builders created from a document that only carries a name.
PLACEHOLDER_CONTACT_PERSON = "Contact Person"
PLACEHOLDER_PHONE = "+91 0000000000"
PLACEHOLDER_ADDRESS = "Address not provided"

DEFAULT_UPLOADED_BY = "Current User"
