"""
Promote a registered user to admin.

Usage:
    python -m scripts.promote_admin user@example.com

Reads the same settings as the API (environment / .env).
"""
import asyncio
import logging
import sys

from core.data.uow import create_uow
from core.domain.enums import UserRole
from core.domain.exceptions import NotFoundError
from core.infrastructure.database.config import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from core.infrastructure.logging import configure_logging
from core.infrastructure.security import PasswordHasher
from core.settings import get_app_settings


logger = logging.getLogger(__name__)


async def promote(email: str) -> int:
    """Give the account registered under `email` the admin role.

    Returns:
        Process exit code
    """
    settings = get_app_settings()
    engine = create_engine(settings.database)
    session_factory = create_session_factory(engine)
    hasher = PasswordHasher(rounds=settings.auth.bcrypt_rounds)

    try:
        await init_database(engine)
        async with create_uow(session_factory, hasher) as uow:
            user = await uow.users.find_by_email(email)
            if user is None:
                raise NotFoundError(f"No user registered with {email}")
            await uow.users.update_role(user.id, UserRole.ADMIN)
            await uow.commit()
        logger.info(f"✅ {email} (id={user.id}) is now admin")
        return 0
    except NotFoundError as e:
        logger.error(e.message)
        return 1
    finally:
        await close_database(engine)


def main() -> None:
    configure_logging("INFO")
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(promote(sys.argv[1])))


if __name__ == "__main__":
    main()
