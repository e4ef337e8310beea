from datetime import timedelta

import pytest
from sqlmodel import select

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.errors import DuplicateEntryError
from src.domain.base import utcnow
from src.domain.entities import Family, FamilyInvitation, FamilyMember, FamilyRole, User


def make_user(email: str) -> User:
    return User(name="Jane Doe", email=email, password_hash="x" * 60)


@pytest.mark.asyncio
async def test_duplicate_email_raises(db_session):
    uow = SqlAlchemyUnitOfWork(db_session)
    async with uow:
        await uow.users.create(make_user("jane@example.com"))
        await uow.commit()

    async with uow:
        with pytest.raises(DuplicateEntryError):
            await uow.users.create(make_user("jane@example.com"))

    users = (await db_session.exec(select(User))).all()
    assert len(users) == 1


@pytest.mark.asyncio
async def test_duplicate_member_keeps_transaction(db_session):
    """Duplicate roster insert

    Given a user already on a family roster and an open invitation
    When the invitation is marked used and the same roster row is inserted again
    Then the insert raises and the invitation update still commits
    """
    uow = SqlAlchemyUnitOfWork(db_session)
    async with uow:
        owner = await uow.users.create(make_user("john@example.com"))
        jane = await uow.users.create(make_user("jane@example.com"))
        family = await uow.families.create(Family(name="Smith Family", owner_id=owner.id))
        await uow.members.create(
            FamilyMember(family_id=family.id, user_id=jane.id, role=FamilyRole.member)
        )
        invitation = await uow.invitations.create(
            FamilyInvitation(
                family_id=family.id, code="ABCD1234", expires_at=utcnow() + timedelta(days=3)
            )
        )
        await uow.commit()

    async with uow:
        assert await uow.invitations.mark_used(invitation.id, utcnow())
        with pytest.raises(DuplicateEntryError):
            await uow.members.create(FamilyMember(family_id=family.id, user_id=jane.id))
        await uow.commit()

    roster = (
        await db_session.exec(select(FamilyMember).where(FamilyMember.family_id == family.id))
    ).all()
    assert len(roster) == 1

    stored = (
        await db_session.exec(
            select(FamilyInvitation).where(FamilyInvitation.id == invitation.id)
        )
    ).one()
    await db_session.refresh(stored)
    assert stored.used_at is not None
