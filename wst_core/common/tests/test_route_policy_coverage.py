import pytest

from wst_core.api.urls import router
from wst_core.common.policy import ROUTE_POLICY, SUPER_ADMIN_ONLY, allowed_roles
from wst_core.iam.api.auth import CompleteSetupView, MeView, SetPasswordView
from wst_core.sentinel.api.views import ActiveSessionsView, LoginHistoryView, StatsView

STANDARD_ACTIONS = ("list", "retrieve", "create", "update", "partial_update", "destroy")


def _viewset_actions(viewset):
    names = [a for a in STANDARD_ACTIONS if hasattr(viewset, a)]
    names.extend(extra.__name__ for extra in viewset.get_extra_actions())
    return names


@pytest.mark.parametrize("prefix,viewset", [(p, v) for p, v, _ in router.registry])
def test_every_routed_viewset_action_has_a_policy(prefix, viewset):
    resource = viewset.policy_resource
    missing = [a for a in _viewset_actions(viewset) if (resource, a) not in ROUTE_POLICY]
    assert missing == [], f"{prefix}: no policy for {missing}"


@pytest.mark.parametrize(
    "view",
    [MeView, SetPasswordView, CompleteSetupView, StatsView, ActiveSessionsView, LoginHistoryView],
)
def test_every_session_api_view_method_has_a_policy(view):
    methods = [m for m in view.http_method_names if m not in ("options", "head") and hasattr(view, m)]
    assert methods
    for method in methods:
        assert (view.policy_resource, method) in ROUTE_POLICY


def test_unknown_pairs_deny():
    assert allowed_roles("employees", "partial_update") is None
    assert allowed_roles(None, "list") is None
    assert allowed_roles("sentinel.stats", "get") == SUPER_ADMIN_ONLY
