"""
Infrastructure layer package.

Adapters implementing domain ports: SQLAlchemy repositories, bcrypt,
python-jose tokens, SMTP mail, and the OpenAI-compatible LLM client.
"""
