"""Static C templates for the four standard assignments."""

from __future__ import annotations


def _template(comment: str, todo: str) -> str:
    return "\n".join(
        [
            "#include <stdio.h>",
            "",
            "int main() {",
            f"    // {comment}",
            f"    // TODO: {todo}",
            "    ",
            "    return 0;",
            "}",
        ]
    )


ASSIGNMENT_TEMPLATES: dict[str, str] = {
    "課題1": _template(
        "課題1: Hello World を出力するプログラム",
        "printf関数を使用してHello Worldを出力してください",
    ),
    "課題2": _template(
        "課題2: 変数を使った計算プログラム",
        "int型の変数を宣言し、計算を行ってください",
    ),
    "課題3": _template(
        "課題3: 条件分岐を使ったプログラム",
        "if文を使用した条件分岐を実装してください",
    ),
    "課題4": _template(
        "課題4: ループを使ったプログラム",
        "for文またはwhile文を使用したループを実装してください",
    ),
}


def get_template(label: str) -> str | None:
    """Return the template source for an assignment label, if known."""
    return ASSIGNMENT_TEMPLATES.get(label)


def list_assignments() -> list[str]:
    return sorted(ASSIGNMENT_TEMPLATES)
