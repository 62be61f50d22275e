# semlog/infra/__init__.py
