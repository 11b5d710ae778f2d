"""Shared fixtures: an in-memory phone repository and an API client wired to it."""

import copy

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from phone_catalog.application.interfaces import PhoneRepository
from phone_catalog.application.services import AuthService
from phone_catalog.domain.entities import Phone, PhoneFilter, PhoneSummary
from phone_catalog.domain.exceptions import InvalidIdentifierError
from phone_catalog.infrastructure.auth.jwt_token_codec import JwtTokenCodec
from phone_catalog.infrastructure.dependencies import (
    get_auth_service,
    get_file_storage,
    get_phone_repository,
)
from phone_catalog.infrastructure.storage.local_file_storage import LocalFileStorage
from phone_catalog.main import app

TEST_USER = "alice"
TEST_PASSWORD = "wonderland"
TEST_SECRET = "test-secret"


class FakePhoneRepository(PhoneRepository):
    """In-memory fake repository. Stored phones are copies, like a real store."""

    def __init__(self):
        self._phones: dict[str, Phone] = {}

    @staticmethod
    def _check_id(phone_id: str) -> None:
        if not ObjectId.is_valid(phone_id):
            raise InvalidIdentifierError(phone_id)

    def _matching(self, phone_filter: PhoneFilter) -> list[Phone]:
        return [
            p for p in self._phones.values()
            if phone_filter.matches(p.title, p.brand, p.description)
        ]

    async def get_by_id(self, phone_id: str) -> Phone | None:
        self._check_id(phone_id)
        phone = self._phones.get(phone_id)
        return copy.deepcopy(phone) if phone else None

    async def find_summaries(self, phone_filter, *, skip=0, limit=None) -> list[PhoneSummary]:
        end = None if limit is None else skip + limit
        return [
            PhoneSummary(id=p.id, title=p.title, brand=p.brand)
            for p in self._matching(phone_filter)[skip:end]
        ]

    async def count(self, phone_filter) -> int:
        return len(self._matching(phone_filter))

    async def create(self, phone: Phone) -> Phone:
        phone.id = str(ObjectId())
        self._phones[phone.id] = copy.deepcopy(phone)
        return phone

    async def create_many(self, phones: list[Phone]) -> int:
        for phone in phones:
            await self.create(phone)
        return len(phones)

    async def update(self, phone: Phone) -> Phone | None:
        self._check_id(phone.id)
        if phone.id not in self._phones:
            return None
        self._phones[phone.id] = copy.deepcopy(phone)
        return copy.deepcopy(phone)

    async def delete(self, phone_id: str) -> bool:
        self._check_id(phone_id)
        return self._phones.pop(phone_id, None) is not None

    async def delete_all(self) -> int:
        removed = len(self._phones)
        self._phones.clear()
        return removed

    def stored(self, phone_id: str) -> Phone:
        return copy.deepcopy(self._phones[phone_id])

    def __len__(self) -> int:
        return len(self._phones)


def make_phone(title: str = "Pixel 9", brand: str = "Google", description: str = "A phone") -> Phone:
    return Phone(
        title=title,
        brand=brand,
        description=description,
        image_url="https://img.test/p.png",
    )


@pytest.fixture
def repository() -> FakePhoneRepository:
    return FakePhoneRepository()


@pytest.fixture
def phone_factory():
    return make_phone


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(JwtTokenCodec(TEST_SECRET, expires_minutes=5), TEST_USER, TEST_PASSWORD)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def api_app(repository, auth_service, upload_dir):
    app.dependency_overrides[get_phone_repository] = lambda: repository
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_file_storage] = lambda: LocalFileStorage(str(upload_dir))
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_app):
    transport = ASGITransport(app=api_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Accept": "application/json"},
    ) as http_client:
        yield http_client
