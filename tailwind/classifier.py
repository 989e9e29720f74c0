"""
Utility-Class Classifier
Decides whether a class token is an atomic-CSS utility, which is exempt from
"undefined class" checks and from heat ranking.
"""

from typing import Iterable


class UtilityClassifier:
    def __init__(self, vocabulary: Iterable[str] = ()):
        self.vocabulary = frozenset(vocabulary)

    @staticmethod
    def base_name(class_name: str) -> str:
        """Strip variant prefixes such as `hover:` or `md:`."""
        return class_name[class_name.rfind(':') + 1:]

    def is_utility_class(self, class_name: str) -> bool:
        if not class_name:
            return True
        base = self.base_name(class_name)
        if base in self.vocabulary:
            return True
        # arbitrary values, e.g. w-[32rem]
        return '[' in base and ']' in base
