from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException

from ddlforge.config import config
from ddlforge.services.ddl_synthesis import (
    IndexDefinition,
    NormalizedField,
    UnsupportedDialect,
    build_dcl,
    build_ddl,
    collect_field_warnings,
    default_registry,
)
from ddlforge.services.ddl_synthesis.mapping import (
    get_canonical_base_type,
    get_field_type_for_database,
)
from ddlforge.services.qa import verify_sql
from ddlforge.utils.logger import setup_logger

api_router = APIRouter(prefix=f"/api/{config.get('api', {}).get('version', 'v1')}")

# Setup logger for API
logger = setup_logger('api_routes')


def _require_dialect(data: Dict[str, Any]) -> str:
    dialect = data.get('dialect')
    if not dialect:
        raise HTTPException(status_code=400, detail='dialect is required')
    if not default_registry.is_supported(dialect):
        raise HTTPException(status_code=400, detail=str(UnsupportedDialect(dialect)))
    return dialect


def _parse_fields(data: Dict[str, Any]) -> List[NormalizedField]:
    raw_fields = data.get('fields') or []
    if not isinstance(raw_fields, list) or not all(isinstance(f, dict) for f in raw_fields):
        raise HTTPException(status_code=400, detail='fields must be a list of objects')
    fields = [NormalizedField.from_dict(f) for f in raw_fields]
    return [f for f in fields if f.name.strip() and f.type.strip()]


def _parse_indexes(data: Dict[str, Any]) -> List[IndexDefinition]:
    raw_indexes = data.get('indexes') or []
    if not isinstance(raw_indexes, list) or not all(isinstance(i, dict) for i in raw_indexes):
        raise HTTPException(status_code=400, detail='indexes must be a list of objects')
    for index in raw_indexes:
        index_fields = index.get('fields') or []
        if not isinstance(index_fields, list) or not all(isinstance(f, dict) for f in index_fields):
            raise HTTPException(status_code=400, detail='index fields must be a list of objects')
    return [IndexDefinition.from_dict(i) for i in raw_indexes]


@api_router.get('/dialects')
def list_dialects():
    return {'dialects': default_registry.supported_dialects()}


@api_router.post('/ddl')
def generate_ddl(data: Dict[str, Any] = Body(...)):
    """Generate CREATE TABLE, comment and index statements for one table."""
    dialect = _require_dialect(data)
    fields = _parse_fields(data)
    indexes = _parse_indexes(data)
    table_name = data.get('table_name') or ''

    try:
        ddl = build_ddl(dialect, table_name, data.get('table_comment') or '', fields, indexes)
    except UnsupportedDialect as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"DDL generation failed for '{table_name}': {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    response = {'ddl': ddl, 'warnings': collect_field_warnings(dialect, fields)}
    if data.get('verify'):
        response['syntax'] = verify_sql(dialect, ddl)
    return response


@api_router.post('/dcl')
def generate_dcl(data: Dict[str, Any] = Body(...)):
    dialect = _require_dialect(data)
    principals = data.get('principals') or []
    if not isinstance(principals, list):
        raise HTTPException(status_code=400, detail='principals must be a list of strings')

    try:
        dcl = build_dcl(dialect, data.get('table_name') or '', [str(p) for p in principals])
    except UnsupportedDialect as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {'dcl': dcl}


@api_router.post('/types/map')
def map_types(data: Dict[str, Any] = Body(...)):
    """Render each raw type string for the dialect."""
    dialect = _require_dialect(data)
    types = data.get('types') or []
    if not isinstance(types, list):
        raise HTTPException(status_code=400, detail='types must be a list of strings')

    return {
        'dialect': dialect,
        'mappings': [
            {
                'input': str(raw),
                'canonical': get_canonical_base_type(str(raw)),
                'rendered': get_field_type_for_database(dialect, str(raw)),
            }
            for raw in types
        ],
    }


@api_router.post('/fields/validate')
def validate_fields(data: Dict[str, Any] = Body(...)):
    dialect = _require_dialect(data)
    fields = _parse_fields(data)
    return {'warnings': collect_field_warnings(dialect, fields)}
