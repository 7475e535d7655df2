"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados y la conversión de números a texto.
"""

from .calculator import CalculatorState, Operator
from .numbers import ERROR_TEXT, format_number, parse_number

__all__ = ['CalculatorState', 'Operator', 'ERROR_TEXT', 'format_number', 'parse_number']
