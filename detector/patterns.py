# ─── Entropy detection constants ──────────────────────────────────────────────
# The target alphabet is the 64 base64 symbols plus the "=" padding character.

BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
MIN_SECRET_LENGTH = 20
BASE64_ENTROPY_THRESHOLD = 4.5

IGNORE_FILE_NAME = ".commitlensignore"


# ─── Aggressive word patterns ─────────────────────────────────────────────────
# Applied to a single whitespace-free word, only after the entropy check
# found nothing. "value" names the group holding the assigned secret, when
# the pattern has one, so placeholders can be filtered out.

AGGRESSIVE_PATTERNS = [
    {
        "id": "assigned_credential",
        "name": "Assigned Credential",
        # password=..., "api_key":"...", token:'...'
        "regex": r'''(?i)["']?(password|passwd|pwd|secret|token|api[_-]?key|access[_-]?key)["']?[=:]["']?(?P<value>[^\s"'<>{}]{4,})''',
    },
    {
        "id": "aws_access_key",
        "name": "AWS Access Key",
        "regex": r'\bAKIA[0-9A-Z]{16}\b',
    },
    {
        "id": "bcrypt_hash",
        "name": "Bcrypt Hash",
        "regex": r'\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}',
    },
    {
        "id": "ntlm_hash",
        "name": "NTLM Hash",
        "regex": r'\b[a-fA-F0-9]{32}:[a-fA-F0-9]{32}\b',
    },
]

# Common placeholder values — an assigned value in this set is not a secret
PLACEHOLDER_VALUES = {
    "changeme", "password", "your_password", "yourpassword",
    "example", "test", "placeholder", "todo", "fixme",
    "dummy", "none", "null", "false", "true",
    "***", "xxx", "<password>", "${password}", "%(password)s",
    "testpassword", "samplepassword", "mypassword",
    "pass", "passwd", "enter_password", "yourpasswordhere",
    "secret", "token",
}


# ─── Filename checks ──────────────────────────────────────────────────────────

# File extensions that are flagged regardless of content
FLAGGED_EXTENSIONS = {
    ".kdbx", ".kdb",
    ".pfx", ".p12",
    ".ppk",
    ".pem", ".key",
    ".jks",
    ".wallet",
}

# Filename substrings that mark suspicious files
FLAGGED_NAMES = [
    "password", "passwords", "passwd", "credentials", "creds",
    "secrets", "secret", "apikey", "api_key",
    "serviceaccount", "svc_account", "wallet",
    "id_rsa", "id_dsa", "id_ecdsa", "id_ed25519",
]

# Exact filenames that are always suspicious
FLAGGED_EXACT_NAMES = {".env", ".netrc", ".pgpass", ".htpasswd"}
