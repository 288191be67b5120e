"""
Job type registry for the host context.

The host defines a fixed enumeration of job types. Each job type has an integer
id (its position in the enumeration) and a name. Ids may be unused (gaps), and
some names are internal sentinels that do not follow the public CamelCase
naming convention; both are skipped when listing the public job types.
"""

import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from omegaconf import OmegaConf

from prioritizer.contexts.host.exceptions import UnknownJobTypeError

# Public job type names start with an uppercase letter followed by a lowercase one
PUBLIC_NAME_PATTERN = re.compile(r"^[A-Z][a-z]")


class JobTypeRegistry:
    """
    Bidirectional name <-> id lookup over the host job type enumeration.

    Enumeration order is id order, which is stable for the lifetime of the host.
    """

    def __init__(self, names: List[Optional[str]], first_id: int = 0):
        """
        Args:
            names: Job type names in id order; None marks an unused id
            first_id: Id of the first entry in names
        """
        self._names: Dict[int, str] = {}
        self._ids: Dict[str, int] = {}
        for offset, name in enumerate(names):
            if name is None:
                continue
            job_type = first_id + offset
            self._names[job_type] = name
            self._ids[name] = job_type

    @classmethod
    def from_file(cls, path: Path) -> "JobTypeRegistry":
        """Load a registry from a YAML file with a ``job_types`` list and optional ``first_id``."""
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        return cls(data["job_types"], first_id=data.get("first_id", 0))

    def __contains__(self, name: str) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        """Yield (id, name) pairs in enumeration order."""
        for job_type in sorted(self._names):
            yield job_type, self._names[job_type]

    def id_of(self, name: str) -> int:
        """
        Resolve a job type name to its id.

        Raises:
            UnknownJobTypeError: If the name is not a known job type
        """
        try:
            return self._ids[name]
        except KeyError:
            raise UnknownJobTypeError(name) from None

    def name_of(self, job_type: int) -> str:
        """
        Resolve a job type id to its name.

        Raises:
            UnknownJobTypeError: If the id is unused
        """
        try:
            return self._names[job_type]
        except KeyError:
            raise UnknownJobTypeError(job_type) from None

    def public_names(self) -> List[str]:
        """Names following the public naming convention, in enumeration order."""
        return [name for _, name in self if PUBLIC_NAME_PATTERN.match(name)]
