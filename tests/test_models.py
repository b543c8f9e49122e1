import pytest

from tweets.models import Tweet

pytestmark = pytest.mark.django_db


def test_str_shows_user_and_head_of_body(alice, make_tweet):
    tweet = make_tweet(alice, body="a" * 30)

    assert str(tweet) == f"alice: {'a' * 20}"


def test_default_ordering_is_newest_first(alice, make_tweet):
    old = make_tweet(alice, body="old", minutes_ago=10)
    new = make_tweet(alice, body="new", minutes_ago=1)

    assert list(Tweet.objects.all()) == [new, old]


def test_tweets_are_removed_with_their_user(alice, make_tweet):
    make_tweet(alice)

    alice.delete()

    assert Tweet.objects.count() == 0
