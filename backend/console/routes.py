"""
URL path -> page table and the authentication gate.

Unauthenticated users only ever see the landing page at ``/``; while
authenticated, ``/`` is the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

LANDING = "landing"
NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Route:
    path: str
    page: str
    title: str
    icon: str


PROTECTED_ROUTES: List[Route] = [
    Route("/", "dashboard", "Dashboard", "📊"),
    Route("/contracts", "contracts", "Contratos", "📝"),
    Route("/clients", "clients", "Clientes", "👥"),
    Route("/suppliers", "suppliers", "Fornecedores", "🏢"),
    Route("/employees", "employees", "Equipe", "🧑‍💼"),
    Route("/projects", "projects", "Projetos", "📁"),
    Route("/documents", "documents", "Documentos", "📄"),
    Route("/financial", "financial", "Financeiro", "💰"),
    Route("/settings", "settings", "Configurações", "⚙️"),
    Route("/profile", "profile", "Perfil", "🙍"),
    Route("/calendar", "calendar", "Calendário", "📅"),
]

LANDING_ROUTE = Route("/", LANDING, "Entrar", "⚖️")
NOT_FOUND_ROUTE = Route("/not-found", NOT_FOUND, "Página não encontrada", "❓")


@dataclass(frozen=True)
class Resolution:
    page: str
    redirected: bool = False


def normalize(path: Optional[str]) -> str:
    if not path:
        return "/"
    path = "/" + path.strip().strip("/")
    return path


def routes_for(authenticated: bool) -> List[Route]:
    """The routes registered for the current auth state, default first."""
    return list(PROTECTED_ROUTES) if authenticated else [LANDING_ROUTE]


def resolve(path: Optional[str], authenticated: bool) -> Resolution:
    path = normalize(path)

    if not authenticated:
        return Resolution(LANDING, redirected=path != "/")

    for route in PROTECTED_ROUTES:
        if route.path == path:
            return Resolution(route.page)
    return Resolution(NOT_FOUND)


def url_path(route: Route) -> str:
    """Streamlit url_path for a route ('' is the default page)."""
    return route.path.lstrip("/")


def registered_routes(authenticated: bool) -> List[Route]:
    """Every page handed to st.navigation; the 404 page only exists behind login."""
    if authenticated:
        return routes_for(True) + [NOT_FOUND_ROUTE]
    return routes_for(False)


def requested_path(url: Optional[str], base_path: Optional[str] = "") -> str:
    """Path of the browser URL relative to the server's base URL path."""
    path = urlparse(url or "").path
    base = normalize(base_path)
    if base != "/" and (path == base or path.startswith(base + "/")):
        path = path[len(base):]
    return normalize(path)
