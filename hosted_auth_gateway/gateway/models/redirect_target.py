from enum import Enum


class RedirectTarget(str, Enum):
    ERROR_PAGE = "/error"
    DASHBOARD = "/dashboard"
