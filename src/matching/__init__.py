from .matcher import BashMatcher, get_default_matcher, is_match, match, match_all

__all__ = ["BashMatcher", "get_default_matcher", "is_match", "match", "match_all"]
