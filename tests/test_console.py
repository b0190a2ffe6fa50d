from decimal import Decimal
from types import SimpleNamespace

import pytest
import requests

from console import mock_data
from console.api_client import (
    ApiClient,
    ApiError,
    ApiUnavailableError,
    QueryCache,
    UnauthorizedError,
    collection_root,
)
from console.formatting import format_brl, format_date, format_growth, format_revenue_k
from console.panels import financial_summary, month_statistics, overview_kpis, productivity
from console.routes import (
    LANDING,
    NOT_FOUND,
    PROTECTED_ROUTES,
    registered_routes,
    requested_path,
    resolve,
    routes_for,
    url_path,
)
from console.service import get_advanced_stats, get_alerts, get_revenue_chart


# ======================================================================================
# fake HTTP session
# ======================================================================================
class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body
        self.content = b"" if body is None else b"x"
        self.text = "" if body is None else str(body)

    def json(self):
        return self._body


class FakeSession:
    def __init__(self, routes=None, error=None):
        self.routes = routes or {}
        self.error = error
        self.calls = []
        self.cookies = requests.cookies.RequestsCookieJar()

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append((method, url, params))
        if self.error:
            raise self.error
        path = url.split("8000", 1)[1]
        return self.routes.get((method, path), FakeResponse(200, []))


def make_api(**kwargs):
    session = FakeSession(**kwargs)
    return ApiClient("http://api:8000/", session=session), session


# ======================================================================================
# routing
# ======================================================================================
def test_unauthenticated_always_lands_on_landing():
    assert resolve("/", False).page == LANDING
    assert not resolve("/", False).redirected

    for path in ("/contracts", "/financial", "/nao-existe"):
        result = resolve(path, False)
        assert result.page == LANDING
        assert result.redirected


def test_authenticated_routes():
    assert resolve("/", True).page == "dashboard"
    assert resolve("/contracts/", True).page == "contracts"
    assert resolve("calendar", True).page == "calendar"
    assert resolve("/nao-existe", True).page == NOT_FOUND


def test_route_table():
    assert len(PROTECTED_ROUTES) == 11
    assert routes_for(False)[0].page == LANDING
    assert routes_for(True)[0].path == "/"
    assert url_path(routes_for(True)[0]) == ""
    assert url_path(routes_for(True)[1]) == "contracts"


def test_registered_routes():
    assert [r.page for r in registered_routes(False)] == [LANDING]

    pages = [r.page for r in registered_routes(True)]
    assert pages[0] == "dashboard"
    assert pages[-1] == NOT_FOUND
    assert len(pages) == len(PROTECTED_ROUTES) + 1


@pytest.mark.parametrize(
    "url, base, expected",
    [
        ("http://localhost:8501/", "", "/"),
        ("http://localhost:8501/contracts?tab=1", "", "/contracts"),
        ("http://localhost:8501/nao-existe/", "", "/nao-existe"),
        ("http://host/lawdesk/contracts", "lawdesk", "/contracts"),
        ("http://host/lawdesk", "/lawdesk/", "/"),
        ("http://host/lawdesk-old/contracts", "lawdesk", "/lawdesk-old/contracts"),
        (None, "", "/"),
    ],
)
def test_requested_path(url, base, expected):
    assert requested_path(url, base) == expected


# ======================================================================================
# formatting
# ======================================================================================
@pytest.mark.parametrize(
    "value, expected",
    [
        (1250000, "R$ 1250k"),
        ("1249500.00", "R$ 1250k"),
        (Decimal("999"), "R$ 1k"),
        (0, "R$ 0k"),
        (None, "R$ 0k"),
    ],
)
def test_format_revenue_k(value, expected):
    assert format_revenue_k(value) == expected


def test_format_brl():
    assert format_brl("1250000.5") == "R$ 1.250.000,50"
    assert format_brl(-10) == "-R$ 10,00"


def test_format_growth_and_date():
    assert format_growth(18.7) == "+18.7%"
    assert format_growth(-3) == "-3%"
    assert format_growth(0) == "+0%"
    assert format_date("2026-03-05T10:00:00") == "05/03/2026"
    assert format_date(None) == "—"


# ======================================================================================
# query cache / api client
# ======================================================================================
def test_cache_key_ignores_param_order_and_none():
    assert QueryCache.key("/api/x", {"a": 1, "b": "2"}) == QueryCache.key("/api/x", {"b": 2, "a": "1", "c": None})


def test_collection_root():
    assert collection_root("/api/contracts/abc") == "/api/contracts"
    assert collection_root("/api/transactions/summary") == "/api/transactions"


def test_repeated_query_uses_cache():
    api, session = make_api(routes={("GET", "/api/clients"): FakeResponse(200, [{"id": "1"}])})

    first = api.query("/api/clients", {"type": None})
    second = api.query("/api/clients")

    assert first == second == [{"id": "1"}]
    assert len(session.calls) == 1
    # None params are not sent
    assert session.calls[0][2] is None


def test_mutation_invalidates_collection_and_dashboard():
    api, session = make_api()
    api.query("/api/contracts", {"status": "active"})
    api.query("/api/contracts/1")
    api.query("/api/dashboard/advanced-stats", {"range": "30d"})
    api.query("/api/clients")
    assert len(api.cache) == 4

    api.update("/api/contracts/1", {"status": "completed"})

    assert len(api.cache) == 1
    assert QueryCache.key("/api/clients") in api.cache


def test_unauthorized_raises():
    api, _ = make_api(routes={("GET", "/api/clients"): FakeResponse(401, {"message": "Unauthorized"})})
    with pytest.raises(UnauthorizedError):
        api.query("/api/clients")
    assert len(api.cache) == 0


def test_current_user_is_none_without_session():
    api, _ = make_api(routes={("GET", "/api/auth/user"): FakeResponse(401, {"message": "Unauthorized"})})
    assert api.current_user() is None


def test_client_errors_carry_detail():
    api, _ = make_api(routes={("POST", "/api/contracts"): FakeResponse(400, {"detail": "client_id 'x' does not exist"})})
    with pytest.raises(ApiError) as exc:
        api.create("/api/contracts", {"title": "X", "client_id": "x"})
    assert exc.value.status_code == 400
    assert "client_id" in exc.value.detail


def test_unreachable_api():
    api, _ = make_api(error=requests.ConnectionError("refused"))
    with pytest.raises(ApiUnavailableError):
        api.query("/api/clients")


def test_server_error_is_unavailable():
    api, _ = make_api(routes={("GET", "/api/clients"): FakeResponse(500, "boom")})
    with pytest.raises(ApiUnavailableError):
        api.query("/api/clients")


def test_login_and_logout_clear_cache():
    api, session = make_api(routes={("POST", "/api/login"): FakeResponse(200, {"id": "u1"})})
    api.query("/api/clients")

    assert api.login("a@b.c", "x") == {"id": "u1"}
    assert len(api.cache) == 0

    api.query("/api/clients")
    api.logout()
    assert len(api.cache) == 0


# ======================================================================================
# dashboard data with mock fallback
# ======================================================================================
def test_mock_mode_never_calls_api():
    api, session = make_api()
    result = get_advanced_stats(api, use_mock=True)

    assert result.source == "mock"
    assert result.data == mock_data.advanced_stats_mock()
    assert session.calls == []


def test_falls_back_to_mock_when_api_is_down():
    api, _ = make_api(error=requests.Timeout("slow"))
    result = get_alerts(api, use_mock=False)

    assert result.source == "mock"
    assert result.warning
    assert [a["id"] for a in result.data] == ["1", "2"]


def test_live_data_when_api_answers():
    points = [{"month": "2026-06", "income": 10.0, "expense": 0.0}]
    api, _ = make_api(routes={("GET", "/api/dashboard/revenue-chart"): FakeResponse(200, points)})

    result = get_revenue_chart(api, use_mock=False)
    assert result.source == "api"
    assert result.data == points


def test_unauthorized_is_not_masked_by_mock():
    api, _ = make_api(routes={("GET", "/api/dashboard/advanced-stats"): FakeResponse(401, {})})
    with pytest.raises(UnauthorizedError):
        get_advanced_stats(api, use_mock=False)


# ======================================================================================
# panels
# ======================================================================================
def test_financial_summary_from_mock_stats():
    assert financial_summary(mock_data.advanced_stats_mock()) == [
        ("Receita Mensal", "R$ 1250k"),
        ("Contratos Ativos", "24"),
        ("Crescimento", "+18.7%"),
    ]


def test_overview_kpis_handle_missing_stats():
    kpis = overview_kpis(None)
    assert [k.value for k in kpis] == ["R$ 0k", "0", "0", "0"]


def test_month_statistics_and_productivity():
    events = [{"kind": "contract_end"}, {"kind": "contract_end"}, {"kind": "project_end"}]
    rows = dict(month_statistics(events))
    assert rows["Vencimentos de contrato"] == 2
    assert rows["Total de Compromissos"] == 3

    projects = [{"status": "completed"}, {"status": "active"}, {"status": "active"}]
    assert productivity(projects, 4) == [("Concluídos", 1), ("Em Andamento", 2), ("Pendentes", 4)]


def test_switching_dashboard_tabs_reuses_fetched_panels():
    stats = mock_data.advanced_stats_mock()
    api, session = make_api(routes={("GET", "/api/dashboard/advanced-stats"): FakeResponse(200, stats)})

    # overview tab, then financial tab, then back: same query each time
    for _ in range(3):
        assert get_advanced_stats(api, use_mock=False, time_range="30d").data == stats
    assert len(session.calls) == 1

    # another period is a different query
    get_advanced_stats(api, use_mock=False, time_range="7d")
    assert len(session.calls) == 2


# ======================================================================================
# entrypoint
# ======================================================================================
class FakePage:
    def __init__(self, render, title=None, icon=None, url_path=None, default=False):
        self.render = render
        self.title = title
        self.url_path = url_path
        self.default = default


@pytest.fixture
def run_console(monkeypatch):
    from console import app, session

    events = []

    def navigation(pages, position=None):
        events.append(("navigation", [p.url_path for p in pages]))
        default = next(p for p in pages if p.default)
        return SimpleNamespace(run=lambda: events.append(("run", default.title)))

    monkeypatch.setattr(session, "PAGES", {})
    monkeypatch.setattr(app.st, "set_page_config", lambda **kwargs: None)
    monkeypatch.setattr(app.st, "Page", FakePage)
    monkeypatch.setattr(app.st, "navigation", navigation)
    monkeypatch.setattr(app.st, "get_option", lambda name: "")
    monkeypatch.setattr(app.st, "info", lambda body: events.append(("info", body)))
    monkeypatch.setattr(app, "_sidebar", lambda routes: events.append(("sidebar", len(routes))))
    monkeypatch.setitem(app.VIEWS, NOT_FOUND, SimpleNamespace(render=lambda: events.append(("not_found",))))

    def run(url, authenticated):
        events.clear()
        monkeypatch.setattr(app.st, "context", SimpleNamespace(url=url))
        monkeypatch.setattr(session, "is_authenticated", lambda: authenticated)
        app.main()
        return list(events), session.PAGES

    return run


def test_console_registers_only_landing_when_logged_out(run_console):
    events, pages = run_console("http://localhost:8501/", authenticated=False)

    assert list(pages) == [LANDING]
    assert pages[LANDING].default
    assert events == [("navigation", [""]), ("run", "Entrar")]


def test_console_logged_out_deep_link_lands_with_notice(run_console):
    events, _ = run_console("http://localhost:8501/contracts", authenticated=False)

    assert ("info", "Faça login para acessar esta página.") in events
    assert events[-1] == ("run", "Entrar")


def test_console_registers_protected_pages_when_logged_in(run_console):
    events, pages = run_console("http://localhost:8501/", authenticated=True)

    assert list(pages) == [r.page for r in PROTECTED_ROUTES] + [NOT_FOUND]
    assert pages["dashboard"].default
    assert pages[NOT_FOUND].url_path == "not-found"
    assert events[0] == ("sidebar", len(PROTECTED_ROUTES))
    assert events[-1] == ("run", "Dashboard")


def test_console_unknown_path_renders_not_found(run_console):
    events, _ = run_console("http://localhost:8501/nao-existe", authenticated=True)

    assert events[-1] == ("not_found",)
    assert ("run", "Dashboard") not in events
