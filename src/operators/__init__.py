"""
Fuzzy truth operators

Три независимых семейства бинарных операторов над скалярными степенями
принадлежности:
- zadeh: min / max (исключающая семантика множеств)
- einstein: product / sum (независимые принадлежности)
- werner: weighted_min (взвешенное усреднение на основе zadeh.min)

Модули семейств импортируются целиком, чтобы не затенять builtins
min / max / sum: используйте zadeh.min(a, b), einstein.sum(a, b).
"""

from src.operators import einstein, werner, zadeh

__all__ = [
    "einstein",
    "werner",
    "zadeh",
]
