"""Routes ``generate <type>`` to the generator registered for that type.

Only ``component`` exists today.  An unknown type is reported on stderr
but is not treated as a failure: ``dispatch`` still returns exit status 0.
"""

from __future__ import annotations

from argparse import Namespace
from collections.abc import Callable

from cd_engine.config import Config
from cd_engine.scaffolder import ComponentGenerator, build_request
from cd_engine.utils import print_error, print_success, print_summary_table

Handler = Callable[[Namespace, Config], int]


class UnknownGenerationTypeError(Exception):
    """Raised when no generator is registered for a type token."""

    def __init__(self, gen_type: str) -> None:
        self.gen_type = gen_type
        super().__init__(f"Unknown type: {gen_type}")


def generate_component(options: Namespace, config: Config) -> int:
    """Handle ``generate component``.

    ``ScaffoldError`` subclasses propagate to the caller.
    """
    request = build_request(
        title=options.title,
        table=options.table,
        create=options.create,
        filter=options.filter,
        columns=options.columns,
    )
    result = ComponentGenerator(config).generate(request)
    print_success(f"Component generated successfully: {result.component_dir}")
    print_summary_table(result.as_summary(), title=result.identity.class_name)
    return 0


GENERATORS: dict[str, Handler] = {
    "component": generate_component,
}


def get_handler(gen_type: str) -> Handler:
    try:
        return GENERATORS[gen_type]
    except KeyError:
        raise UnknownGenerationTypeError(gen_type) from None


def dispatch(gen_type: str, options: Namespace, config: Config) -> int:
    """Run the generator registered for *gen_type* and return an exit status."""
    try:
        handler = get_handler(gen_type)
    except UnknownGenerationTypeError as exc:
        print_error(str(exc))
        return 0
    return handler(options, config)
