"""
Static registry of the API routes.
Routes are declared through an EndpointRegistry, which records a
RouteDescriptor for each one before handing it to the FastAPI router.
Every descriptor lists the app-wide middleware the registry was built with.
The root endpoint serves the recorded descriptors as the API directory.
app.endpoints.py
"""
from typing import Callable, List, Sequence

from fastapi import APIRouter

from app.schemas import RouteDescriptor


class EndpointRegistry:
    def __init__(self, router: APIRouter, middlewares: Sequence[str] = ()):
        self.router = router
        self.middlewares = list(middlewares)
        self._routes: List[RouteDescriptor] = []

    def route(self, path: str, methods: Sequence[str] = ("GET",), **kwargs) -> Callable:
        descriptor = RouteDescriptor(
            path=path,
            methods=[m.upper() for m in methods],
            middlewares=list(self.middlewares),
        )

        def decorator(func: Callable) -> Callable:
            self._routes.append(descriptor)
            return self.router.api_route(path, methods=descriptor.methods, **kwargs)(func)

        return decorator

    def get(self, path: str, **kwargs) -> Callable:
        return self.route(path, methods=("GET",), **kwargs)

    @property
    def routes(self) -> List[RouteDescriptor]:
        return list(self._routes)
