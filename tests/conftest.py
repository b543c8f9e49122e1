"""
共通 fixture
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from tweets.models import Tweet


@pytest.fixture
def alice(django_user_model):
    return django_user_model.objects.create_user(username="alice", password="password123")


@pytest.fixture
def bob(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="password123")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def alice_client(alice):
    client = APIClient()
    client.force_login(alice)
    return client


@pytest.fixture
def make_tweet():
    """
    ツイートを作成する。minutes_ago を指定すると created_at をずらす
    """

    def _make_tweet(user, body="hello", minutes_ago=None):
        tweet = Tweet.objects.create(user=user, body=body)
        if minutes_ago is not None:
            created_at = timezone.now() - timedelta(minutes=minutes_ago)
            Tweet.objects.filter(pk=tweet.pk).update(created_at=created_at)
            tweet.refresh_from_db()
        return tweet

    return _make_tweet
