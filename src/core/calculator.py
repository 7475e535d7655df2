"""
Lógica de calculadora aritmética básica de cuatro operaciones.

Este módulo contiene la máquina de estados CalculatorState, que recibe
símbolos de entrada discretos (dígitos, operadores, comandos de control)
y mantiene el valor del display, el historial de la operación y el estado
de error/bloqueo.
"""

import operator
from enum import Enum

from .numbers import ERROR_TEXT, format_number, parse_number


# ============================================================================
# VOCABULARIO DE ENTRADA - Símbolos que entrega la interfaz
# ============================================================================
DIGITS = "0123456789"
DECIMAL = "."
EQUALS = "="
CLEAR_ALL = "C"
CLEAR_ENTRY = "CE"
BACKSPACE = "←"
TOGGLE_SIGN = "±"


# ============================================================================
# ENUM: Operator
# Propósito: Conjunto cerrado de operaciones con su símbolo de display
# ============================================================================
class Operator(str, Enum):
    """Las cuatro operaciones, cada una identificada por su símbolo fijo."""
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "x"
    DIVIDE = "÷"

    @property
    def glyph(self):
        return self.value

    @classmethod
    def from_glyph(cls, glyph):
        """Retorna el operador de un símbolo, o None si no es un operador."""
        return _OPERATORS_BY_GLYPH.get(glyph)


_OPERATORS_BY_GLYPH = {op.value: op for op in Operator}

# División se resuelve aparte para detectar el divisor cero
_ARITHMETIC = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
}


# ============================================================================
# CLASE: CalculatorState
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir el número del display dígito por dígito
#   - Encadenar operaciones de izquierda a derecha (sin precedencia)
#   - Repetir la última operación al pulsar = varias veces
#   - Bloquear la entrada tras una división por cero
# ============================================================================
class CalculatorState:
    """
    Estado completo de la calculadora, mutado en cada símbolo de entrada.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current
        2. Usuario selecciona operación → current pasa a stored
           (si ya había una operación pendiente, se resuelve primero)
        3. Usuario ingresa el segundo operando
        4. Usuario presiona = → se aplica la operación y el resultado
           queda en current y stored
        5. Presionar = otra vez repite la última operación con el mismo operando

    Variables de estado:
        - current: Texto del display ("0", "12.5", "Error", ...)
        - history: Rastro de la operación (ej: "5 +", "5 + 2 =")
        - stored: Operando izquierdo acumulado
        - op: Operación pendiente de su operando derecho
        - last_op: Última operación aplicada (para repetir con =)
        - last_operand: Último operando derecho usado (para repetir con =)
        - error: True tras una división por cero (bloquea la entrada)
        - evaluated: True justo después de un = exitoso
    """

    def __init__(self):
        """Inicializa calculadora en estado vacío."""
        self._reset()

    def _reset(self):
        self.current = "0"
        self.history = ""
        self.stored = 0.0
        self.op = None
        self.last_op = None
        self.last_operand = None
        self.error = False
        self.evaluated = False

    def handle_input(self, token):
        """
        Procesa un símbolo de entrada y actualiza el estado.

        Args:
            token (str): Símbolo recibido de la interfaz ("7", "+", "CE", ...)

        Bloqueo:
            Tras una división por cero solo se aceptan "C" y "CE"; cualquier
            otro símbolo se ignora sin modificar el estado.

        Símbolos desconocidos se ignoran; nunca se lanza una excepción.
        """
        if self.error and token not in (CLEAR_ALL, CLEAR_ENTRY):
            return

        if isinstance(token, str) and len(token) == 1 and token in DIGITS:
            self.input_digit(token)
        elif token == DECIMAL:
            self.input_decimal()
        elif Operator.from_glyph(token) is not None:
            self.set_operation(token)
        elif token == EQUALS:
            self.calculate()
        elif token == CLEAR_ALL:
            self.clear_all()
        elif token == CLEAR_ENTRY:
            self.clear_entry()
        elif token == BACKSPACE:
            self.backspace()
        elif token == TOGGLE_SIGN:
            self.toggle_sign()

    # ========================================================================
    # COMANDOS DE BORRADO
    # ========================================================================
    def clear_all(self):
        """
        Borra TODO el estado de la calculadora (C = Clear).

        Única forma de olvidar las operaciones anteriores; también sale del
        bloqueo por error.
        """
        self._reset()

    def clear_entry(self):
        """
        Borra solo la entrada actual (CE = Clear Entry).

        Conserva stored, op, last_op, last_operand e history, de modo que la
        operación en curso puede continuar tras corregir el último número.
        """
        self.current = "0"
        self.error = False

    def _clear_if_evaluated(self):
        """Empieza una entrada nueva si lo último fue un = exitoso."""
        if self.evaluated:
            self.history = ""
            self.current = "0"
            self.evaluated = False

    # ========================================================================
    # EDICIÓN DEL NÚMERO ACTUAL
    # ========================================================================
    def input_digit(self, digit):
        """
        Añade un dígito al número actual.

        Args:
            digit (str): Dígito "0"-"9"

        El "0" inicial se reemplaza por el dígito; no hay límite de longitud.
        """
        self._clear_if_evaluated()
        if self.current == "0":
            self.current = digit
        else:
            self.current += digit

    def input_decimal(self):
        """Añade punto decimal si el número actual aún no tiene uno."""
        self._clear_if_evaluated()
        if DECIMAL not in self.current:
            self.current += DECIMAL

    def backspace(self):
        """Borra el último carácter; un display vacío vuelve a "0"."""
        self._clear_if_evaluated()
        self.current = self.current[:-1]
        if not self.current:
            self.current = "0"

    def toggle_sign(self):
        """Cambia el signo del número actual (sin efecto sobre "0")."""
        self._clear_if_evaluated()
        if self.current == "0":
            return
        self.current = format_number(-parse_number(self.current))

    # ========================================================================
    # OPERACIONES
    # ========================================================================
    def set_operation(self, glyph):
        """
        Selecciona una operación, resolviendo antes la que esté pendiente.

        Args:
            glyph (str): Símbolo del operador ("+", "−", "x", "÷")

        Ejemplo de encadenado:
            5 + 3 x  → se resuelve 5 + 3, display "8", history "8 x"
            2 =      → 8 x 2, display "16"
        """
        new_op = Operator.from_glyph(glyph)
        if new_op is None:
            return

        if self.op is not None:
            self._calculate_internal(self.op)
            if self.error:
                return

        self.evaluated = False
        self.stored = parse_number(self.current)
        self.op = new_op
        self.last_op = new_op
        self.current = "0"
        self.last_operand = None
        self.history = f"{format_number(self.stored)} {new_op.glyph}"

    def calculate(self):
        """
        Evalúa la operación (botón =).

        Casos:
            1. Operación pendiente: current es el operando derecho
               ("5 +" → "5 + 2 =")
            2. Sin operación pendiente pero con una anterior: repite la última
               operación con el último operando ("7 + 2=")
            3. Sin ninguna operación: no hace nada
        """
        if self.op is not None:
            op_to_use = self.op
            operand = parse_number(self.current)
            self.last_operand = operand
            self.last_op = op_to_use
            self.history = f"{self.history} {format_number(operand)} ="
        elif self.last_op is not None:
            op_to_use = self.last_op
            # Se relee el display: si se editó entre dos =, stored cambia
            self.stored = parse_number(self.current)
            operand = self.last_operand if self.last_operand is not None else 0.0
            self.history = (f"{format_number(self.stored)} {op_to_use.glyph} "
                            f"{format_number(operand)}=")
            self.current = format_number(operand)
        else:
            return

        self._calculate_internal(op_to_use)

        self.op = None
        self.evaluated = True

    def _calculate_internal(self, op_to_use):
        """
        Combina stored y current con la operación dada.

        El resultado se escribe en current y en stored, de modo que las
        operaciones encadenadas se componen de izquierda a derecha.

        División por cero: activa el bloqueo, muestra "Error", limpia el
        historial y no modifica stored.
        """
        a = self.stored
        b = parse_number(self.current)

        if op_to_use is Operator.DIVIDE:
            if b == 0:
                self.error = True
                self.current = ERROR_TEXT
                self.history = ""
                return
            result = a / b
        else:
            result = _ARITHMETIC[op_to_use](a, b)

        self.current = format_number(result)
        self.stored = result

    # ========================================================================
    # LECTURA DESDE LA INTERFAZ
    # ========================================================================
    def get_display(self):
        """Texto del display principal."""
        return self.current

    def get_expression(self):
        """Rastro de la operación para el display secundario."""
        return self.history

    def is_error(self):
        """True si el display muestra el texto de error."""
        return self.current == ERROR_TEXT
