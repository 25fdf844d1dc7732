from dataclasses import dataclass, asdict, fields
from typing import Dict, List


@dataclass
class JobRecord:
    """
    Flat record for one job detail page. Every field is a string and
    defaults to "" so all records share the same columns.
    """

    title: str = ""
    company: str = ""
    location: str = ""
    datePosted: str = ""
    description: str = ""
    seniorityLevel: str = ""
    industries: str = ""
    employmentType: str = ""
    jobFunctions: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
