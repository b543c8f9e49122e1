import logging

from django.core.paginator import EmptyPage, Page, Paginator
from django.shortcuts import get_object_or_404

from .models import Tweet
from .serializers import TweetFormSerializer

logger = logging.getLogger(__name__)


class TweetService:
    """
    ツイートの取得・作成・更新・削除サービス

    所有者チェックは呼び出し元（views）で済ませてから呼ぶこと。
    """

    PER_PAGE = 3

    @classmethod
    def list_page(cls, page: str | int | None = None) -> Page:
        """
        作成日時の降順でツイートを1ページ分取得する（投稿者を一緒に読み込む）

        Args:
            page: ページ番号。未指定・数値以外・1未満なら1ページ目

        Returns:
            Page。最終ページより後ろを指定した場合は空のページ
        """
        number = cls.parse_page(page)
        tweets = Tweet.objects.select_related("user").order_by("-created_at")
        paginator = Paginator(tweets, cls.PER_PAGE)

        try:
            return paginator.page(number)
        except EmptyPage:
            return Page([], number, paginator)

    @staticmethod
    def parse_page(page: str | int | None) -> int:
        try:
            number = int(page)
        except (TypeError, ValueError):
            return 1
        return number if number >= 1 else 1

    @classmethod
    def find(cls, pk: int) -> Tweet:
        """存在しない場合は Http404"""
        return get_object_or_404(Tweet.objects.select_related("user"), pk=pk)

    @classmethod
    def create(cls, identity, params: dict) -> Tweet:
        """
        ツイートを作成する

        Args:
            identity: 投稿者（ログインユーザー）
            params: tweet_params で絞り込んだ入力値

        Raises:
            ValidationError: body が空・長すぎる場合
        """
        serializer = TweetFormSerializer(data=params, context={"identity": identity})
        serializer.is_valid(raise_exception=True)
        tweet = serializer.save()
        logger.info(f"Tweet created: id={tweet.pk} user_id={identity.pk}")
        return tweet

    @classmethod
    def update(cls, tweet: Tweet, params: dict) -> Tweet:
        # body 以外（user / created_at）は変更しない
        serializer = TweetFormSerializer(tweet, data=params, partial=True)
        serializer.is_valid(raise_exception=True)
        tweet = serializer.save()
        logger.info(f"Tweet updated: id={tweet.pk} user_id={tweet.user_id}")
        return tweet

    @classmethod
    def destroy(cls, tweet: Tweet) -> None:
        pk, user_id = tweet.pk, tweet.user_id
        tweet.delete()
        logger.info(f"Tweet destroyed: id={pk} user_id={user_id}")
