"""Instancia compartida de SQLAlchemy.

Vive en su propio módulo para que modelos, servicios y la factory la
importen sin ciclos.
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
