import logging

from django.contrib import messages
from django.core.paginator import Page
from django.shortcuts import redirect
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidAction
from .params import tweet_params
from .permissions import check_owner, check_tweet_owner, resolve_identity
from .serializers import TweetSerializer
from .services import TweetService

logger = logging.getLogger(__name__)

NOTICE_CREATED = "Tweet was successfully created."
NOTICE_UPDATED = "Tweet was successfully updated."
NOTICE_DESTROYED = "Tweet was successfully destroyed."


def page_context(page: Page) -> dict:
    num_pages = page.paginator.num_pages
    return {
        "number": page.number,
        "num_pages": num_pages,
        "count": page.paginator.count,
        "has_next": page.has_next(),
        "has_previous": page.has_previous(),
        "next_page_number": page.number + 1 if page.has_next() else None,
        "previous_page_number": min(page.number - 1, num_pages) if page.has_previous() else None,
    }


class TweetBaseView(APIView):
    """HTML（テンプレート）と JSON の両方で返す"""

    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]

    def handle_exception(self, exc):
        # 所有者チェック失敗はトップへリダイレクト（理由は返さない）
        if isinstance(exc, InvalidAction):
            logger.warning(
                f"Invalid action: {self.request.method} {self.request.path} ({exc.reason})"
            )
            messages.error(self.request, exc.message)
            return redirect("root")
        return super().handle_exception(exc)


class TweetListView(TweetBaseView):
    """ツイート一覧"""

    def get(self, request: Request) -> Response:
        page = TweetService.list_page(request.query_params.get("page"))
        serializer = TweetSerializer(page.object_list, many=True)

        return Response(
            {"tweets": serializer.data, "page": page_context(page)},
            status=status.HTTP_200_OK,
            template_name="tweets/index.html",
        )


class TweetNewView(TweetBaseView):
    """ツイート作成フォーム"""

    def get(self, request: Request) -> Response:
        identity = resolve_identity(request)

        return Response(
            {
                "tweet": {"body": ""},
                "errors": {},
                "user_id": identity.pk if identity else None,
            },
            status=status.HTTP_200_OK,
            template_name="tweets/new.html",
        )


class TweetDetailView(TweetBaseView):
    """ツイート詳細"""

    def get(self, request: Request, pk: int) -> Response:
        tweet = TweetService.find(pk)
        serializer = TweetSerializer(tweet)

        return Response(
            {"tweet": serializer.data},
            status=status.HTTP_200_OK,
            template_name="tweets/show.html",
        )


class UserTweetListView(TweetBaseView):
    """ツイート作成"""

    def post(self, request: Request, user_id: str) -> Response:
        """
        ツイート作成

        Request Body:
            - tweet[body]: 本文（必須、280文字以内）

        Returns:
            302: 作成成功（トップへ）、または所有者チェック失敗
            400: バリデーションエラー（作成フォームを再表示）
        """
        identity = check_owner(resolve_identity(request), user_id)
        params = tweet_params(request)

        try:
            TweetService.create(identity, params)
        except ValidationError as e:
            logger.warning(f"Tweet creation failed: {e.detail}")
            return Response(
                {
                    "tweet": {"body": params.get("body", "")},
                    "errors": e.detail,
                    "user_id": identity.pk,
                },
                status=status.HTTP_400_BAD_REQUEST,
                template_name="tweets/new.html",
            )

        messages.success(request, NOTICE_CREATED)
        return redirect("root")


class UserTweetEditView(TweetBaseView):
    """ツイート編集フォーム"""

    def get(self, request: Request, user_id: str, pk: int) -> Response:
        identity = check_owner(resolve_identity(request), user_id)
        tweet = check_tweet_owner(identity, TweetService.find(pk))

        return Response(
            {"tweet": TweetSerializer(tweet).data, "errors": {}},
            status=status.HTTP_200_OK,
            template_name="tweets/edit.html",
        )


class UserTweetDetailView(TweetBaseView):
    """ツイート更新・削除"""

    def patch(self, request: Request, user_id: str, pk: int) -> Response:
        identity = check_owner(resolve_identity(request), user_id)
        tweet = check_tweet_owner(identity, TweetService.find(pk))
        params = tweet_params(request)

        try:
            TweetService.update(tweet, params)
        except ValidationError as e:
            logger.warning(f"Tweet update failed: id={tweet.pk} {e.detail}")
            return Response(
                {
                    "tweet": {**TweetSerializer(tweet).data, "body": params.get("body", tweet.body)},
                    "errors": e.detail,
                },
                status=status.HTTP_400_BAD_REQUEST,
                template_name="tweets/edit.html",
            )

        messages.success(request, NOTICE_UPDATED)
        return redirect("root")

    def put(self, request: Request, user_id: str, pk: int) -> Response:
        return self.patch(request, user_id, pk)

    def delete(self, request: Request, user_id: str, pk: int) -> Response:
        identity = check_owner(resolve_identity(request), user_id)
        tweet = check_tweet_owner(identity, TweetService.find(pk))

        TweetService.destroy(tweet)

        messages.success(request, NOTICE_DESTROYED)
        return redirect("tweet-list")

    def post(self, request: Request, user_id: str, pk: int) -> Response:
        # HTML フォームは POST しか送れないため _method で振り分ける
        data = request.data
        override = str(data.get("_method", "")).lower() if hasattr(data, "get") else ""

        if override in ("patch", "put"):
            return self.patch(request, user_id, pk)
        if override == "delete":
            return self.delete(request, user_id, pk)
        return self.http_method_not_allowed(request)
