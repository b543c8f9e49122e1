class InvalidAction(Exception):
    """
    所有者チェックに失敗した操作

    理由（未ログイン・user_id 不一致・他人のツイート）は呼び出し元に返さない。
    """

    def __init__(self, message="Invalid action", reason=""):
        self.message = message
        self.reason = reason
        super().__init__(self.message)
