from typing import Iterator, List

from pydantic import BaseModel, ConfigDict


class DropdownOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    description: str


class DropdownCatalogue:
    """Fixed, ordered option list of one dropdown.

    Codes and descriptions are each unique. Lookups return an empty string
    when nothing matches; callers rely on that as a "not found" signal.
    """

    def __init__(self, *options: DropdownOption):
        codes = [option.code for option in options]
        descriptions = [option.description for option in options]
        if len(set(codes)) != len(codes):
            raise ValueError(f"Duplicate codes in dropdown catalogue: {codes}")
        if len(set(descriptions)) != len(descriptions):
            raise ValueError(f"Duplicate descriptions in dropdown catalogue: {descriptions}")
        self._options = tuple(options)
        self._by_code = {option.code: option for option in options}
        self._by_description = {option.description: option for option in options}

    def code_for(self, description: str) -> str:
        option = self._by_description.get(description)
        return option.code if option else ""

    def description_for(self, code: str) -> str:
        option = self._by_code.get(code)
        return option.description if option else ""

    def descriptions(self) -> List[str]:
        return [option.description for option in self._options]

    def codes(self) -> List[str]:
        return [option.code for option in self._options]

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[DropdownOption]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)
