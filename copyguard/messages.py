from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

CHECKMARK    = ("✓", "green")
CROSSMARK    = ("✗", "red")
QUESTIONMARK = ("?", "yellow")
INFOMARK     = ("i", "blue")

def _message(mark: tuple[str, str], *args):
    symbol, color = mark
    prefix = '[' + colored(symbol, color) + ']'
    indent = ' ' * len(f"[{symbol}]")

    lines = '\n'.join(str(arg) for arg in args).split('\n')
    print(f"{prefix} {lines[0]}")
    for line in lines[1:]:
        print(f"{indent} {line}")

# Violations and failures
def error(*msg): _message(CROSSMARK, *msg)

def warning(*msg): _message(QUESTIONMARK, *msg)

def info(*msg): _message(INFOMARK, *msg)

def success(*msg): _message(CHECKMARK, *msg)
