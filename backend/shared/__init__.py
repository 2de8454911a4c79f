"""
Shared module for common utilities used by the REST API and the CLI.

STRUCTURE:
- shared.security: Authentication and entitlements
  - auth.py: JWT signing/verification, current_user_context, require_entitlement

- shared.infrastructure: Database and request plumbing
  - db.py: SQLAlchemy engine, sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: Entitlement, Resources, SortOrder, Limits

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: LIKE escaping, field name normalization
  - schemas.py: Shared Pydantic schemas

IMPORT EXAMPLES:
    from shared.security.auth import require_entitlement, sign_jwt
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import Entitlement, Resources
    from shared.utils.exceptions import NotFoundError, ValidationError
"""
