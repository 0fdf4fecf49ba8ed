# tests/test_schemas.py
import pytest

from user_backend_api.app.schemas.health import HealthStatus
from user_backend_api.app.schemas.user import User, UserCreate

MODELS = [User, UserCreate, HealthStatus]


@pytest.mark.parametrize("model", MODELS, ids=lambda m: m.__name__)
def test_examples_use_pydantic_v2_keyword(model):
    # The v1 ``example=`` keyword lands in ``json_schema_extra`` and warns.
    for name, field in model.model_fields.items():
        assert field.json_schema_extra is None, name
        assert field.examples, name


def test_user_schema_publishes_examples():
    schema = User.model_json_schema()
    assert schema["properties"]["email"]["examples"] == ["zhang@example.com"]


def test_health_status_defaults():
    assert HealthStatus(message="up").model_dump() == {"status": "ok", "message": "up"}
