from rest_framework.exceptions import ParseError
from rest_framework.request import Request

ROOT_KEY = "tweet"
PERMITTED_FIELDS = ("body",)


def tweet_params(request: Request) -> dict:
    """
    リクエストからツイートの入力値を取り出し、許可されたフィールドだけを返す

    フォーム送信（tweet[body]=...）と JSON（{"tweet": {"body": ...}}）の両方を受け付ける。
    user_id など許可されていないフィールドは捨てる。

    Raises:
        ParseError: tweet の入力値が送信されていない場合
    """
    data = request.data
    if not hasattr(data, "get"):
        raise ParseError(f"param is missing or the value is empty: {ROOT_KEY}")

    submitted = data.get(ROOT_KEY)
    if not isinstance(submitted, dict):
        prefix = f"{ROOT_KEY}["
        submitted = {
            key[len(prefix):-1]: data.get(key)
            for key in data
            if key.startswith(prefix) and key.endswith("]")
        }

    if not submitted:
        raise ParseError(f"param is missing or the value is empty: {ROOT_KEY}")

    return {field: submitted[field] for field in PERMITTED_FIELDS if field in submitted}
