from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import Tweet

User = get_user_model()


class TweetUserSerializer(serializers.ModelSerializer):
    """投稿者（一覧・詳細表示用）"""

    class Meta:
        model = User
        fields = ["id", "username"]
        read_only_fields = ["id", "username"]


class TweetSerializer(serializers.ModelSerializer):
    """
    ツイート一覧・詳細表示用
    """

    user = TweetUserSerializer(read_only=True)

    class Meta:
        model = Tweet
        fields = ["id", "user", "body", "created_at", "updated_at"]
        read_only_fields = ["id", "user", "created_at", "updated_at"]


class TweetFormSerializer(serializers.ModelSerializer):
    """ツイート作成・更新用（body のみ受け付ける）"""

    class Meta:
        model = Tweet
        fields = ["body"]

    def create(self, validated_data):
        # 投稿者はリクエストの値ではなく、解決済みのユーザーで固定する
        validated_data["user"] = self.context["identity"]
        return super().create(validated_data)
