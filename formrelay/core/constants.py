"""
formrelay/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

import re

# ── Uploads ────────────────────────────────────────────────────────────────────

#: Multipart field that carries the résumé on the application route.
RESUME_FIELD: str = "resume"

#: Only PDF résumés are accepted (content-type header).
ALLOWED_RESUME_CONTENT_TYPE: str = "application/pdf"

#: Hard upper bound for a résumé: 10 MiB.
MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

#: Read size when streaming an upload to the scratch directory.
UPLOAD_CHUNK_SIZE: int = 64 * 1024

# ── Validation ─────────────────────────────────────────────────────────────────

#: Deliberately loose ``local@domain.tld`` shape.  Applied with fullmatch().
EMAIL_PATTERN: re.Pattern = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# ── User-facing messages ───────────────────────────────────────────────────────

APPLICATION_INVALID_MESSAGE: str = "Champs obligatoires invalides ou manquants."
CONTACT_INVALID_MESSAGE: str = "Champs invalides ou manquants."

UPLOAD_TOO_LARGE_MESSAGE: str = "Le fichier est trop volumineux (max 10 Mo)."
UPLOAD_NOT_PDF_MESSAGE: str = "Erreur d'upload : Seuls les fichiers PDF sont autorisés."
UPLOAD_UNEXPECTED_FIELD_MESSAGE: str = "Erreur d'upload : champ de fichier inattendu."
UPLOAD_MALFORMED_MESSAGE: str = "Erreur d'upload : formulaire multipart invalide."

APPLICATION_SUCCESS_MESSAGE: str = "Application submitted successfully"
APPLICATION_FAILURE_MESSAGE: str = "Failed to process application"
CONTACT_SUCCESS_MESSAGE: str = "Message sent successfully"
CONTACT_FAILURE_MESSAGE: str = "Failed to send message"
INTERNAL_ERROR_MESSAGE: str = "Internal server error"
