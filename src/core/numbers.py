"""
Conversión entre números y texto del display.

La calculadora guarda los operandos como texto del display y los vuelve a
leer para operar, por lo que ambas conversiones deben ser totales:
nunca lanzan excepciones.
"""

import math

import numpy as np


ERROR_TEXT = "Error"    # Texto fijo del display tras una división por cero


def parse_number(text):
    """
    Interpreta el texto del display como número decimal.

    Args:
        text (str): Texto a interpretar (ej: "12", "3.5", "-0.25", "1.")

    Returns:
        float: Valor numérico, o 0.0 si el texto no es un número válido
               (cadena vacía, "-", "Error", ...)
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


def format_number(value):
    """
    Convierte un número a su representación decimal por defecto.

    Args:
        value (float): Número a formatear

    Returns:
        str: Representación más corta que conserva el valor, sin notación
             científica y sin ".0" final en enteros

    Ejemplos:
        15.0   → "15"
        3.5    → "3.5"
        -0.0   → "-0"
        1e22   → "10000000000000000000000"
        0.1+0.2 → "0.30000000000000004"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim='-')
