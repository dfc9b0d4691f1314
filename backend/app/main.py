"""
Accounts API - FastAPI Application

GraphQL backend for user registration, login, OTP email verification and
role management.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.logging_config import configure_logging
from app.database.connections import close_connections, get_database
from app.database.indexes import create_indexes
from app.graphql_api import create_graphql_router
from app.routers import health

settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes (unique email, OTP expiry)

    Shutdown:
    - Close database connections
    """
    logger.info("Starting up Accounts API...")

    try:
        db = await get_database(settings)
        await create_indexes(db)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down Accounts API...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="Accounts API",
    description="""
## User Accounts GraphQL API

All operations are served from `POST /graphql`.

### Features
- **Registration**: `createUser` with bcrypt-hashed passwords
- **Login**: `loginUser` returns a JWT valid for 48 hours
- **OTP**: `getOtp` emails a one-time code, one active code per address
- **Users**: `listUser`, `getUser`, `updateUser`, `updateUserRole`, `deleteUser`

### Authentication
`updateUser`, `updateUserRole` and `deleteUser` need a token:
```
Authorization: Bearer your_jwt_token
```
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
allowed_origins = [settings.client_url]
if not settings.is_production:
    allowed_origins.append("http://localhost:3000")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(create_graphql_router(settings), prefix="/graphql")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Accounts API",
        "version": "0.1.0",
        "graphql": "/graphql",
        "health": "/health",
    }
