"""All provider Api strategies."""

from ._base import Api, DefaultApi10a, DefaultApi20
from .baidu import BaiduApi
from .github import GitHubApi
from .qq import QQApi
from .twitter import TwitterApi, TwitterAuthenticateApi
from .weibo import WeiboApi

ALL_APIS = [
    BaiduApi,
    GitHubApi,
    QQApi,
    TwitterApi,
    TwitterAuthenticateApi,
    WeiboApi,
]

__all__ = [
    "ALL_APIS",
    "Api",
    "BaiduApi",
    "DefaultApi10a",
    "DefaultApi20",
    "GitHubApi",
    "QQApi",
    "TwitterApi",
    "TwitterAuthenticateApi",
    "WeiboApi",
]
