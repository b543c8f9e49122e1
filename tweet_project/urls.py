from django.urls import include, path

urlpatterns = [
    path("", include("tweets.urls")),
]
