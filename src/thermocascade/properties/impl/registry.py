from typing import Callable, Dict

Selector = Callable[[float], bool]

REGISTRY: Dict[str, Selector] = {}  # category -> predicate on x, checked in registration order
DEFAULT_CATEGORY = "low"

def register(name: str):
    def deco(fn: Selector) -> Selector:
        REGISTRY[name] = fn
        return fn
    return deco

def classify(x: float) -> str:
    for name, accepts in REGISTRY.items():
        if accepts(x):
            return name
    return DEFAULT_CATEGORY
