"""
Módulo de interfaz de usuario.
Contiene la botonera; el renderizador (OpenCV) se importa desde ui.renderer.
"""

from .layout import Button, ButtonLayout, ascii_text

__all__ = ['Button', 'ButtonLayout', 'ascii_text']
