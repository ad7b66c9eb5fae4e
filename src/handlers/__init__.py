"""
Lambda Handlers for User Exhibitions

サーバレス構成のエントリポイント:
- User Exhibitions (GET /exhibitions?userID=...)
"""
