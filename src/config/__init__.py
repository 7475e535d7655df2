"""
Módulo de configuración para la calculadora.
Contiene la configuración de ventana, colores y teclado.
"""

from .display import DisplayConfig

__all__ = ['DisplayConfig']
