import pytest
import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers every table on SQLModel.metadata
from src.adapter.services.jwt_token_service import JwtTokenService
from src.depends import get_session, get_token_service
from src.domain.sale import PaymentMethod, Sale
from src.domain.tour import CommissionType, Tour
from src.domain.user import User, UserRole

TEST_JWT_SECRET = "integration-test-secret-32-bytes-long"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database shared by every session of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def token_service():
    return JwtTokenService(secret=TEST_JWT_SECRET, expires_seconds=300)


@pytest_asyncio.fixture
async def client(db_session, token_service):
    """Create test client with database session and token service overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_token_service] = lambda: token_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api_prefix():
    from config import ApplicationConfig

    return ApplicationConfig.API_PREFIX


@pytest.fixture
def auth_headers(token_service):
    """Bearer header for a user"""

    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {token_service.issue(user.id, user.role)}"}

    return _headers


@pytest.fixture
def create_user(db_session):
    """Persist a user"""

    async def _create(role: UserRole, email: str, **fields) -> User:
        user = User(email=email, role=role, full_name=email.split("@")[0], **fields)
        db_session.add(user)
        await db_session.commit()
        return user

    return _create


@pytest.fixture
def create_sale(db_session):
    """Persist a tour and a sale on it"""

    async def _create(
        seller: User,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        total_amount: str = "150.00",
        promoter: User = None,
        commission_percentage: str = "10",
    ) -> Sale:
        tour = Tour(
            company="Sea Trips",
            commission_type=CommissionType.PERCENTAGE,
            commission_percentage=Decimal(commission_percentage),
        )
        sale = Sale(
            tour_id=tour.id,
            seller_user_id=seller.id,
            promoter_user_id=promoter.id if promoter else None,
            payment_method=payment_method,
            total_amount=Decimal(total_amount),
        )
        db_session.add(tour)
        db_session.add(sale)
        await db_session.commit()
        return sale

    return _create
