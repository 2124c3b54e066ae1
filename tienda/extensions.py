"""Inicialización centralizada de extensiones Flask."""

from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect

# Las instancias se crean aquí y se inicializan en create_app para evitar
# dependencias circulares en tiempo de importación.
csrf = CSRFProtect()
migrate = Migrate()
