"""Uniform ``{success, data, count, message}`` response bodies."""

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def _serialize(data):
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode='json')
    if isinstance(data, list):
        return [_serialize(item) for item in data]
    return data


def success(data=None, *, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    body = {'success': True, 'data': _serialize(data if data is not None else {})}
    return JSONResponse(status_code=status_code, content=body)


def success_list(items: list, *, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    body = {'success': True, 'count': len(items), 'data': _serialize(items)}
    return JSONResponse(status_code=status_code, content=body)


def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'success': False, 'message': message})
