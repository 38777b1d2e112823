"""Shared pytest fixtures: in-memory SQLite, TestClient and fakes for Supabase/OpenAI."""

import os
from datetime import datetime, timedelta, timezone

# Settings se leen al importar app.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_SECRET_KEY"] = "test-admin-key"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "s3cret"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["SITE_URL"] = "http://blog.test"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("SUPABASE_URL", None)
os.environ.pop("SUPABASE_SERVICE_KEY", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models.post import Post
from app.schemas.generation import GeneratedArticle
from app.services.ai_writer import get_info_post_writer
from app.services.supabase_storage import get_storage_service


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeWriter:
    def __init__(self):
        self.article = GeneratedArticle(
            title="서브의 물리학",
            description="서브 속도를 만드는 원리",
            content="<h2>서론</h2><p>라켓 헤드 속도와 회전</p>",
            tags=["서브", "물리"],
            seo_keywords=["테니스 서브"],
            faq=[{"question": "왜 빠른가?", "answer": "회전 때문입니다."}],
        )
        self.topics = []

    def write(self, topic):
        self.topics.append(topic)
        return self.article


class FakeStorage:
    def __init__(self):
        self.uploads = []

    async def upload_image(self, file):
        content = await file.read()
        self.uploads.append((file.filename, file.content_type, len(content)))
        return {"url": f"https://cdn.test/blog-images/{file.filename}", "filename": file.filename}


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fake_writer():
    return FakeWriter()


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def client(db_session, fake_writer, fake_storage):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_info_post_writer] = lambda: fake_writer
    app.dependency_overrides[get_storage_service] = lambda: fake_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_post(db_session):
    """Inserta un post directamente en la base de datos."""
    def _make_post(**overrides):
        n = db_session.query(Post).count() + 1
        data = {
            "title": "Sample post",
            "slug": f"sample-{n}",
            "published_at": datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(days=n),
            "content": "<p>Hello world</p>",
            "category": "기타",
            "is_published": True,
            "tags": [],
            "seo_keywords": [],
            "faq": [],
            "word_count": 2,
        }
        data.update(overrides)
        post = Post(**data)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post
