from django.urls import path

from . import views

urlpatterns = [
    path("", views.TweetListView.as_view(), name="root"),
    path("tweets", views.TweetListView.as_view(), name="tweet-list"),
    path("tweets/new", views.TweetNewView.as_view(), name="tweet-new"),
    path("tweets/<int:pk>", views.TweetDetailView.as_view(), name="tweet-detail"),
    path("users/<str:user_id>/tweets", views.UserTweetListView.as_view(), name="user-tweet-list"),
    path("users/<str:user_id>/tweets/<int:pk>", views.UserTweetDetailView.as_view(), name="user-tweet-detail"),
    path("users/<str:user_id>/tweets/<int:pk>/edit", views.UserTweetEditView.as_view(), name="user-tweet-edit"),
]
