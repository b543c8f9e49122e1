from typing import TYPE_CHECKING, Optional

from rest_framework.request import Request

from .exceptions import InvalidAction

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractBaseUser

    from .models import Tweet


def resolve_identity(request: Request) -> Optional["AbstractBaseUser"]:
    """ログイン中のユーザーを返す。未ログインなら None"""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return user


def check_owner(identity: Optional["AbstractBaseUser"], user_id: str) -> "AbstractBaseUser":
    """
    パスの user_id とログインユーザーが一致するか確認する

    Args:
        identity: resolve_identity で解決したユーザー
        user_id: URL の user_id（文字列のまま比較する）

    Returns:
        identity

    Raises:
        InvalidAction: 未ログイン、または user_id が一致しない場合
    """
    if identity is None:
        raise InvalidAction(reason="anonymous")
    if str(user_id) != str(identity.pk):
        raise InvalidAction(reason=f"user_id mismatch: path={user_id} identity={identity.pk}")
    return identity


def check_tweet_owner(identity: "AbstractBaseUser", tweet: "Tweet") -> "Tweet":
    if tweet.user_id != identity.pk:
        raise InvalidAction(reason=f"tweet {tweet.pk} is owned by user {tweet.user_id}")
    return tweet
