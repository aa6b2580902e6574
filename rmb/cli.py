"""rmb CLI entry point.

Subcommands:
    - convert: capitalize one or more RMB amounts
    - check:   validate an amount string

Examples:
    rmb convert 1234.56            # 人民币壹仟贰佰叁拾肆元伍角陆分
    rmb convert 100 10001 0.05     # table, one row per amount
    rmb convert 100 0.05 --plain   # tab separated output
    rmb convert -l "¥1,234.567"    # lenient: read as 1234.56
    rmb convert                    # interactive prompt, q to quit
    rmb check 12.345               # exit code 1
"""

from . import convert
from ._cli import new_typer_app


# Root Typer app; expose -h/--help on all levels
app = new_typer_app(help="Convert RMB amounts to capitalized Chinese numerals.")

# Mount the commands directly on the root app
convert.register(app)


if __name__ == '__main__':
    # Delegate to Typer's CLI runner
    app()
