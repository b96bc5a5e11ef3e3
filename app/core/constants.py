"""Application constants."""

from typing import List


# ===================
# Storage Labels
# ===================

CLAIM_LABEL = "Claim"
CREDENTIAL_LABEL = "Credential"
PRIMARY_KEY = "id"


# ===================
# Claim Search
# ===================

# Exact-match search requires all of these (camelCase, as stored)
EXACT_SEARCH_FIELDS: List[str] = ["firstName", "lastName", "policyNumber"]

# RFC 1123 format used for dateSubmitted
SUBMITTED_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S GMT"


# ===================
# Response Bodies
# ===================

CREDENTIAL_MISMATCH_BODY = "don't match"
LOGOUT_BODY = "logged out"
