import re
from typing import Any, Dict, Optional

from ..models.tracker import RouteVariable

RE_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def cast_route_variable_as_type(var_type: str, value: Optional[str]) -> Any:
    """
    number  -> entero base 10 al inicio del texto ('12px' -> 12); None si no hay
    boolean -> True solo con el literal 'true'
    resto   -> el texto sin tocar
    """
    if value is None:
        return None
    if var_type == "number":
        m = RE_LEADING_INT.match(value)
        return int(m.group(1)) if m else None
    if var_type == "boolean":
        return value == "true"
    return value


def cast_route_variables(variables: Dict[str, RouteVariable]) -> Dict[str, Any]:
    return {key: cast_route_variable_as_type(var.type, var.value) for key, var in variables.items()}
