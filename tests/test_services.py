import pytest
from django.http import Http404
from rest_framework.exceptions import ValidationError

from tweets.models import Tweet
from tweets.services import TweetService

pytestmark = pytest.mark.django_db


@pytest.fixture
def five_tweets(alice, bob, make_tweet):
    # tweet0 が最新
    return [
        make_tweet(alice if i % 2 == 0 else bob, body=f"tweet{i}", minutes_ago=i)
        for i in range(5)
    ]


def test_list_page_returns_three_newest_first(five_tweets):
    page = TweetService.list_page()

    assert [t.body for t in page.object_list] == ["tweet0", "tweet1", "tweet2"]
    assert page.paginator.num_pages == 2


def test_list_page_second_page(five_tweets):
    page = TweetService.list_page("2")

    assert [t.body for t in page.object_list] == ["tweet3", "tweet4"]


@pytest.mark.parametrize("page", [None, "", "abc", "0", "-3", 0])
def test_list_page_falls_back_to_first_page(five_tweets, page):
    assert TweetService.list_page(page).number == 1


def test_list_page_past_the_end_is_empty(five_tweets):
    page = TweetService.list_page(10)

    assert list(page.object_list) == []
    assert page.number == 10


def test_list_page_loads_users_in_one_query(five_tweets, django_assert_num_queries):
    page = TweetService.list_page()

    with django_assert_num_queries(1):
        usernames = [t.user.username for t in page.object_list]

    assert usernames == ["alice", "bob", "alice"]


def test_find_missing_tweet_raises_404():
    with pytest.raises(Http404):
        TweetService.find(999)


def test_create_sets_user_from_identity(alice):
    tweet = TweetService.create(alice, {"body": "hello world"})

    assert tweet.user_id == alice.pk
    assert tweet.body == "hello world"


@pytest.mark.parametrize("params", [{}, {"body": ""}, {"body": "x" * 281}])
def test_create_rejects_invalid_body(alice, params):
    with pytest.raises(ValidationError) as excinfo:
        TweetService.create(alice, params)

    assert "body" in excinfo.value.detail
    assert Tweet.objects.count() == 0


def test_update_changes_only_body(alice, make_tweet):
    tweet = make_tweet(alice, body="before", minutes_ago=5)
    created_at = tweet.created_at

    TweetService.update(tweet, {"body": "after"})

    tweet.refresh_from_db()
    assert tweet.body == "after"
    assert tweet.user_id == alice.pk
    assert tweet.created_at == created_at


def test_update_with_blank_body_keeps_stored_body(alice, make_tweet):
    tweet = make_tweet(alice, body="before")

    with pytest.raises(ValidationError):
        TweetService.update(tweet, {"body": ""})

    tweet.refresh_from_db()
    assert tweet.body == "before"


def test_destroy_deletes_tweet(alice, make_tweet):
    tweet = make_tweet(alice)

    TweetService.destroy(tweet)

    assert not Tweet.objects.filter(pk=tweet.pk).exists()
