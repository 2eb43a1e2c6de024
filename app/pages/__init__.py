# app/pages/__init__.py
