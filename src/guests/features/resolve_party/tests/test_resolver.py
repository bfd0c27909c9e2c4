import pytest

from src.auth.identity import AdminPolicy, Identity
from src.guests.features.resolve_party.resolver import PartyResolver
from src.guests.tests.inmemory_models import (
    InMemoryGuestReadModel,
    InMemoryGuestStore,
    InMemoryIdentityLinkWriteModel,
    create_test_guest,
    create_test_plus_one,
)


@pytest.fixture
def john():
    return create_test_guest(first_name="John", email="John@Example.com", invite_code="JOHN-2345")


@pytest.fixture
def store(john):
    return InMemoryGuestStore([john, create_test_plus_one(john)])


@pytest.fixture
def link_model(store):
    return InMemoryIdentityLinkWriteModel(store)


@pytest.fixture
def resolver(store, link_model):
    return PartyResolver(
        read_model=InMemoryGuestReadModel(store),
        link_write_model=link_model,
        admin_policy=AdminPolicy(["admin@example.com"]),
    )


async def test_resolve_anonymous_by_code(resolver, john):
    party = await resolver.resolve(None, " john-2345 ")

    assert party.invite_code == "JOHN-2345"
    assert party.primary_guest.id == john.id
    assert party.plus_one.first_name == "Jane"
    assert party.is_logged_in is False
    assert party.is_admin is False


async def test_resolve_anonymous_without_code(resolver):
    assert await resolver.resolve(None) is None
    assert await resolver.resolve(None, "garbage") is None


async def test_resolve_links_identity_by_email(resolver, link_model, john):
    identity = Identity(user_id="user-1", email="john@example.com")

    party = await resolver.resolve(identity)

    assert party.primary_guest.id == john.id
    assert party.is_logged_in is True
    assert link_model.links == [(john.id, "user-1")]

    # second visit is found through the stored link
    party = await resolver.resolve(identity)
    assert party.primary_guest.id == john.id
    assert len(link_model.links) == 1


async def test_resolve_skips_email_linked_to_someone_else(store, resolver, link_model, john):
    await link_model.link_guest(john.id, "someone-else")
    link_model.links.clear()

    party = await resolver.resolve(Identity(user_id="user-2", email="john@example.com"))

    assert party is None
    assert link_model.links == []


async def test_resolve_falls_back_to_code_for_unknown_identity(resolver, john):
    identity = Identity(user_id="stranger", email="stranger@example.com")

    party = await resolver.resolve(identity, "JOHN-2345")

    assert party.primary_guest.id == john.id
    assert party.is_logged_in is True


async def test_resolve_flags_admins(resolver):
    identity = Identity(user_id="admin", email="ADMIN@example.com")

    party = await resolver.resolve(identity, "JOHN-2345")

    assert party.is_admin is True
