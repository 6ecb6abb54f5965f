from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Optional
from rich.console import Console

if TYPE_CHECKING:
    from torch.utils.tensorboard import SummaryWriter

# progress goes to stderr; lines are printed literally
console = Console(stderr=True, highlight=False, soft_wrap=True)

def get_logger(save_dir: Path, use_tb: bool = True):
    save_dir.mkdir(parents=True, exist_ok=True)
    writer: Optional["SummaryWriter"] = None
    if use_tb:
        from torch.utils.tensorboard import SummaryWriter
        writer = SummaryWriter(str(save_dir))
    return Console(), writer

def progress(msg: str) -> None:
    console.print(msg, markup=False)
