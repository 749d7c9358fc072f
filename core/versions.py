APP_VERSION = "0.1.0"
DOCUMENT_SCHEMA_VERSION = "v1"


# =============================================================================
# Name                     | Meaning                         | Changes when…
# ------------------------ | ------------------------------- | ---------------------------------------
# APP_VERSION              | overall app/package version     | you ship a release
# DOCUMENT_SCHEMA_VERSION  | shape of output/output.json     | you add/remove/rename RunDocument fields
# =============================================================================
