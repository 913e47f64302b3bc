"""HTTP Basic accounts, the request access policy and feature gates.

The policy is a plain table of ``AccessRule`` entries; ``resolve_access_rule``
picks the first rule matching a method and path, independent of any routing.
The tables are enforced by ``AccessControlMiddleware`` before dispatch.
"""
import secrets
from dataclasses import dataclass
from enum import StrEnum
from fnmatch import fnmatchcase

from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.config import Settings


class Role(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Account:
    username: str
    password: str
    roles: frozenset[Role]


@dataclass(frozen=True)
class Principal:
    username: str
    roles: frozenset[Role]


@dataclass(frozen=True)
class AccessRule:
    patterns: tuple[str, ...]
    methods: frozenset[str] | None = None  # None matches any method
    roles: frozenset[Role] = frozenset()  # empty: any authenticated principal
    public: bool = False

    def matches(self, method: str, path: str) -> bool:
        if self.methods is not None and method.upper() not in self.methods:
            return False
        return any(_path_matches(pattern, path) for pattern in self.patterns)


def _path_matches(pattern: str, path: str) -> bool:
    # "/x/**" covers "/x" and everything below it
    if pattern.endswith("/**"):
        base = pattern[:-3]
        return fnmatchcase(path, base) or fnmatchcase(path, base + "/*")
    return fnmatchcase(path, pattern)


ANY_ROLE = frozenset({Role.USER, Role.ADMIN})
ADMIN_ONLY = frozenset({Role.ADMIN})

ACCESS_POLICY: tuple[AccessRule, ...] = (
    AccessRule(
        patterns=("/health", "/info", "/docs*", "/redoc*", "/openapi.json"),
        public=True,
    ),
    AccessRule(patterns=("/tours/**",), methods=frozenset({"GET"}), roles=ANY_ROLE),
    AccessRule(
        patterns=("/tours/**",),
        methods=frozenset({"POST", "PUT", "PATCH", "DELETE"}),
        roles=ADMIN_ONLY,
    ),
)

DEFAULT_RULE = AccessRule(patterns=("/**",))


def resolve_access_rule(
    method: str, path: str, policy: tuple[AccessRule, ...] = ACCESS_POLICY,
) -> AccessRule:
    for rule in policy:
        if rule.matches(method, path):
            return rule
    return DEFAULT_RULE


def is_allowed(rule: AccessRule, principal: Principal | None) -> bool:
    if rule.public:
        return True
    if principal is None:
        return False
    if not rule.roles:
        return True
    return bool(rule.roles & principal.roles)


@dataclass(frozen=True)
class FeatureGate:
    pattern: str
    feature: str


TOUR_RATINGS_FEATURE = "tour-ratings"

FEATURE_GATES: tuple[FeatureGate, ...] = (
    FeatureGate(pattern="/tours/*/ratings/**", feature=TOUR_RATINGS_FEATURE),
)


def resolve_feature_gate(
    path: str, gates: tuple[FeatureGate, ...] = FEATURE_GATES,
) -> str | None:
    """Return the feature flag guarding ``path``, if any."""
    for gate in gates:
        if _path_matches(gate.pattern, path):
            return gate.feature
    return None


def build_accounts(settings: Settings) -> dict[str, Account]:
    accounts = (
        Account(settings.user_username, settings.user_password, frozenset({Role.USER})),
        Account(settings.admin_username, settings.admin_password, frozenset({Role.ADMIN})),
    )
    return {a.username: a for a in accounts}


def authenticate(
    accounts: dict[str, Account], credentials: HTTPBasicCredentials,
) -> Principal | None:
    """Check Basic credentials against the configured accounts."""
    account = accounts.get(credentials.username)
    if account is None or not secrets.compare_digest(
        credentials.password.encode("utf-8"), account.password.encode("utf-8"),
    ):
        return None
    return Principal(username=account.username, roles=account.roles)


basic_auth = HTTPBasic(auto_error=False)
