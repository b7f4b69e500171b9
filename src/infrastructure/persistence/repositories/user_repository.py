"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain User (with its tagged profile) and the users /
participants / admins tables.
"""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import AdminProfile, ParticipantProfile, User
from src.domain.enums import UserRole
from src.domain.protocols.user_repository import DuplicateAccountError
from src.infrastructure.persistence.models.admin import Admin as AdminModel
from src.infrastructure.persistence.models.participant import (
    Participant as ParticipantModel,
)
from src.infrastructure.persistence.models.user import User as UserModel


def user_to_domain(user_model: UserModel) -> User:
    """Convert an account row (with loaded profile) to a domain User.

    Shared with LoginLogRepository, which joins accounts onto log rows.
    """
    profile: ParticipantProfile | AdminProfile | None = None
    if user_model.participant is not None:
        p = user_model.participant
        profile = ParticipantProfile(
            name=p.name,
            college=p.college,
            hostel_name=p.hostel_name,
            wifi_username=p.wifi_username,
            wifi_password=p.wifi_password,
            contact_number=p.contact_number,
            hostel_location=p.hostel_location,
            avatar_url=p.avatar_url,
            gender=p.gender,
        )
    elif user_model.admin is not None:
        a = user_model.admin
        profile = AdminProfile(name=a.name, avatar_url=a.avatar_url, gender=a.gender)

    return User(
        id=user_model.id,
        email=user_model.email,
        uid=user_model.uid,
        password_hash=user_model.password_hash,
        role=UserRole(user_model.role),
        profile=profile,
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Does NOT inherit from the protocol (structural typing). Every write
    commits immediately.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_uid("P-0001")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find account by ID."""
        user_model = await self._get_model(user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find account by email (case-insensitive, exact match)."""
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_uid(self, uid: str) -> User | None:
        """Find account by participant UID."""
        stmt = select(UserModel).where(UserModel.uid == uid.strip())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def exists_by_email_or_uid(self, email: str, uid: str | None) -> bool:
        """Check if an account already uses this email or UID."""
        conditions = [func.lower(UserModel.email) == email.strip().lower()]
        if uid:
            conditions.append(UserModel.uid == uid.strip())
        stmt = select(UserModel.id).where(or_(*conditions)).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> None:
        """Create account and profile rows.

        Raises:
            DuplicateAccountError: If email or UID already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateAccountError(str(e.orig)) from e

    async def update(self, user: User) -> None:
        """Update account and profile rows from the domain entity.

        Raises:
            NoResultFound: If the account doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.uid = user.uid
        user_model.password_hash = user.password_hash
        user_model.updated_at = user.updated_at

        profile = user.profile
        if isinstance(profile, ParticipantProfile) and user_model.participant:
            p = user_model.participant
            p.name = profile.name
            p.college = profile.college
            p.hostel_name = profile.hostel_name
            p.hostel_location = profile.hostel_location
            p.wifi_username = profile.wifi_username
            p.wifi_password = profile.wifi_password
            p.contact_number = profile.contact_number
            p.avatar_url = profile.avatar_url
            p.gender = profile.gender
        elif isinstance(profile, AdminProfile) and user_model.admin:
            a = user_model.admin
            a.name = profile.name
            a.avatar_url = profile.avatar_url
            a.gender = profile.gender

        await self.session.commit()

    async def delete(self, user_id: UUID) -> None:
        """Delete account; profile rows cascade, login logs keep their rows.

        Raises:
            NoResultFound: If the account doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        await self.session.delete(user_model)
        await self.session.commit()

    async def list_all(self) -> list[User]:
        """List all accounts, newest first."""
        stmt = select(UserModel).order_by(UserModel.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_participants(self) -> list[User]:
        """List participant accounts ordered by name."""
        stmt = (
            select(UserModel)
            .join(ParticipantModel, ParticipantModel.user_id == UserModel.id)
            .where(UserModel.role == UserRole.PARTICIPANT.value)
            .order_by(ParticipantModel.name.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def _get_model(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return user_to_domain(user_model)

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity (and its profile) to database models."""
        user_model = UserModel(
            id=user.id,
            email=user.email,
            uid=user.uid,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        profile = user.profile
        if isinstance(profile, ParticipantProfile):
            user_model.participant = ParticipantModel(
                name=profile.name,
                college=profile.college,
                hostel_name=profile.hostel_name,
                hostel_location=profile.hostel_location,
                wifi_username=profile.wifi_username,
                wifi_password=profile.wifi_password,
                contact_number=profile.contact_number,
                avatar_url=profile.avatar_url,
                gender=profile.gender,
            )
        elif isinstance(profile, AdminProfile):
            user_model.admin = AdminModel(
                name=profile.name,
                avatar_url=profile.avatar_url,
                gender=profile.gender,
            )
        return user_model
