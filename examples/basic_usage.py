"""
Basic example demonstrating how to tokenize a comment and format a type with doctoken.
"""

from doctoken import CommentParser, RegistryLinkResolver, TypeExpressionFormatter
from doctoken.application.dto.comment import CommentResponse
from doctoken.domain.models import (
    STRING_TYPE,
    VOID_TYPE,
    BOOLEAN_TYPE,
    FunctionType,
    InstanceType,
    Parameter,
    UnionType,
)
from doctoken.infrastructure.logging_config import configure_logging_from_settings


def main():
    configure_logging_from_settings()

    resolver = RegistryLinkResolver({"goog.ui.Widget": "class"})

    parser = CommentParser(resolver)
    comment = parser.parse_comment(
        "Renders a {@link goog.ui.Widget widget} into {@code element}. "
        "See {@link goog.ui.Menu} for menus."
    )
    print(CommentResponse.from_comment(comment).model_dump_json(indent=2))

    print(parser.get_summary("Configures the widget. See docs.").text)

    signature = FunctionType(
        parameters=[
            Parameter(STRING_TYPE),
            Parameter(UnionType([STRING_TYPE, VOID_TYPE]), optional=True),
        ],
        return_type=BOOLEAN_TYPE,
        this_type=InstanceType("goog.ui.Widget"),
    )
    formatter = TypeExpressionFormatter(resolver)
    print(formatter.format(signature).text)
    print(formatter.format_declared(signature).text)


if __name__ == "__main__":
    main()
