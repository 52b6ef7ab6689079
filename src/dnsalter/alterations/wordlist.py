from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.errors import WordlistError

# Built-in seed vocabulary: frequent hyphen-delimited fragments of
# subdomain labels (environments, roles, regions).
DEFAULT_WORDS: List[str] = [
    # environments
    "dev","develop","development","test","testing","qa","uat","stage","staging",
    "stg","preprod","prod","production","sandbox","demo","beta","alpha","old","new",
    "legacy","backup","bak","tmp","temp","internal","int","ext","external","private",
    "public","corp",
    # roles / services
    "api","app","apps","web","www","admin","portal","auth","login","sso","mail",
    "smtp","imap","pop","mx","ns","dns","vpn","remote","gw","gateway","proxy","lb",
    "cdn","static","assets","img","images","media","files","ftp","git","ci","jenkins",
    "build","db","sql","mysql","redis","cache","search","monitor","status","metrics",
    "log","logs","grafana","kibana","elastic","docs","wiki","help","support","shop",
    "store","pay","m","mobile","cloud","k8s","edge","node","srv","server","host",
    # regions
    "us","eu","asia","east","west","north","south","central","uk","de","fr","jp",
]


def _dedupe(words: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for w in words:
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def load_wordlist(path: Union[str, Path]) -> List[str]:
    """
    One word per line; blank lines and '#' comments skipped; lower-cased;
    first occurrence wins.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise WordlistError(f"Cannot read wordlist {p}: {e}") from e

    words = []
    for line in text.splitlines():
        w = line.strip().lower()
        if not w or w.startswith("#"):
            continue
        words.append(w)
    return _dedupe(words)


def resolve_wordlist(path: Optional[Union[str, Path]] = None) -> List[str]:
    if path:
        return load_wordlist(path)
    return list(DEFAULT_WORDS)
