"""
Pytest configuration and fixtures for ddlforge tests.
"""
import os
import tempfile

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("DDLFORGE_LOGS_DIR", tempfile.mkdtemp(prefix="ddlforge-logs-"))

import pytest

from ddlforge.services.ddl_synthesis import (
    DefaultKind,
    IndexDefinition,
    IndexDirection,
    IndexField,
    NormalizedField,
    create_default_registry,
)


@pytest.fixture
def registry():
    """An isolated registry so substitutions never leak between tests."""
    return create_default_registry(render_identity=False, oracle_public_synonyms=False)


@pytest.fixture
def users_fields():
    return [
        NormalizedField(name="id", type="int", nullable=False, default_kind=DefaultKind.AUTO_INCREMENT),
        NormalizedField(name="name", type="varchar(255)", nullable=True),
    ]


@pytest.fixture
def primary_key_index():
    return IndexDefinition(
        id="pk",
        name="pk_users",
        fields=(
            IndexField(name="id", direction=IndexDirection.ASC),
            IndexField(name="created_at", direction=IndexDirection.DESC),
        ),
        is_primary=True,
    )


@pytest.fixture
def email_index():
    return IndexDefinition(
        id="uk",
        name="uk_users_email",
        fields=(IndexField(name="email"),),
        unique=True,
    )
