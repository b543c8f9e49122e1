from django.conf import settings
from django.db import models


class Tweet(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="tweets",
        verbose_name="投稿者"
    )
    body = models.TextField(
        max_length=280,
        verbose_name="本文"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="作成日時"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="更新日時"
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "ツイート"
        verbose_name_plural = "ツイート"
        indexes = [
            models.Index(fields=["created_at"], name="idx_tweets_created_at"),
        ]

    def __str__(self):
        return f"{self.user}: {self.body[:20]}"
