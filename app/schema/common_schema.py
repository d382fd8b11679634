from enum import Enum


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Platform(str, Enum):
    LEETCODE = "LeetCode"
    CSES = "CSES"
    CODECHEF = "CodeChef"
    CODEFORCES = "Codeforces"
    OTHER = "Other"


DIFFICULTIES = [d.value for d in Difficulty]
PLATFORMS = [p.value for p in Platform]
