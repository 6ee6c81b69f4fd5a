"""
文本工具：slug 生成与随机标题
"""

import random
import re
import unicodedata
from typing import Optional

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_WORD = re.compile(r"[\W_]+")

ADJECTIVES = [
    "amber", "bold", "brave", "bright", "calm", "clever", "cosmic", "crimson",
    "eager", "fancy", "gentle", "golden", "happy", "jolly", "keen", "lively",
    "lucky", "mellow", "nimble", "proud", "quiet", "rapid", "silent", "steady",
    "sunny", "swift", "tidy", "vivid", "warm", "witty",
]

ANIMALS = [
    "badger", "beaver", "condor", "crane", "dolphin", "falcon", "ferret", "fox",
    "gazelle", "heron", "ibex", "jaguar", "koala", "lemur", "lynx", "marten",
    "narwhal", "ocelot", "otter", "panda", "puffin", "raven", "salmon", "seal",
    "sparrow", "tiger", "walrus", "wombat", "yak", "zebra",
]


def kebab_case(value: str) -> str:
    """
    转换为 kebab-case，用作 slug

    先去掉重音符号，非拉丁文字原样保留
    例如 "Engineer Resume" -> "engineer-resume"，"myResume" -> "my-resume"，
    "Résumé Développeur" -> "resume-developpeur"
    """
    value = unicodedata.normalize("NFKD", value or "")
    value = "".join(char for char in value if not unicodedata.combining(char))
    value = _CAMEL_BOUNDARY.sub(r"\1-\2", value)
    return _NON_WORD.sub("-", value).strip("-").lower()


def generate_random_name(rng: Optional[random.Random] = None) -> str:
    """
    生成可读的随机标题，格式为 "形容词 形容词 动物"

    Args:
        rng: 随机数生成器（测试时可传入固定种子）

    Returns:
        如 "Brave Quiet Falcon"
    """
    rng = rng or random.Random()
    first, second = rng.sample(ADJECTIVES, 2)
    words = [first, second, rng.choice(ANIMALS)]
    return " ".join(word.capitalize() for word in words)
