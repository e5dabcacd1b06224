from fastapi import Request

from airport_ops.storage.base import Storage


def get_storage(request: Request) -> Storage:
    # built once in create_app and shared by every request
    return request.app.state.storage
