"""Element — элемент ввода числа и проверка введённых значений.

- NumberElement: настройки элемента + validate()
- NumberElementConfig: шаблоны сообщений
- NumberValidationResult: результат проверки
"""

from .number_element import NumberElement, NumberElementConfig, NumberValidationResult

__all__ = [
    "NumberElement",
    "NumberElementConfig",
    "NumberValidationResult",
]
