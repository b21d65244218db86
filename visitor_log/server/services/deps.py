"""
Visitor Service Dependency.

Resolves the VisitorService attached to the application at creation time.
"""

from typing import Annotated

from fastapi import Depends, Request

from visitor_log.server.services.visitors import VisitorService


def get_visitor_service(request: Request) -> VisitorService:
    return request.app.state.visitor_service


VisitorServiceDep = Annotated[VisitorService, Depends(get_visitor_service)]
