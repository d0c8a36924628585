# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from qtree_lib.core.common import get_panel_width
from qtree_lib.core.config import CFG
from qtree_lib.hierarchy.parser import QueueConfigurationParser
from qtree_lib.hierarchy.queue import Queue
from qtree_lib.properties.operations import QueueOperation


class QueuesPresenter:
    """
    Presents the queue hierarchy built by a queue configuration parser.
    """

    def __init__(
        self, parser: QueueConfigurationParser, user: str, groups: list[str]
    ):
        """
        Initialize the presenter.

        Args:
            parser (QueueConfigurationParser): Parser holding a built hierarchy.
            user (str): Name of the user for which queue availability is displayed.
            groups (list[str]): Groups the user belongs to.
        """
        self._parser = parser
        self._user = user
        self._groups = groups
        root = parser.getRoot()
        self._queues: list[Queue] = root.getChildren() if root else []

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of the queue hierarchy to stdout.
        """
        root = self._parser.getRoot()
        if root is not None:
            print(root.toYaml(), end="")

    def createQueuesInfoPanel(self, console: Console | None = None) -> Group:
        """
        Create a Rich panel displaying the queue hierarchy.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.

        Returns:
            Group: Rich Group containing the queues table.
        """
        console = console or Console()

        panel = Panel(
            Group(self._createQueuesTable(), Text(""), self._createNotes()),
            title=Text(
                "QUEUES",
                style=CFG.queues_presenter.title_style,
                justify="center",
            ),
            border_style=CFG.queues_presenter.border_style,
            padding=(1, 1),
            width=get_panel_width(
                console,
                1,
                CFG.queues_presenter.min_width,
                CFG.queues_presenter.max_width,
            ),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def _createQueuesTable(self) -> Table:
        """
        Construct and return a formatted Rich Table containing queue information.
        """
        table = Table(
            show_header=True,
            box=None,
            padding=(0, 1),
        )

        table.add_column(justify="left")
        for header in ["Name", "State"] + [str(op) for op in QueueOperation]:
            table.add_column(
                header=Text(
                    header, justify="center", style=CFG.queues_presenter.headers_style
                ),
                justify="left",
            )

        for queue in self._queues:
            self._addQueueRow(queue, table)

        return table

    def _addQueueRow(self, queue: Queue, table: Table) -> None:
        """
        Add a single row describing the queue to the table.
        """
        available = self._parser.hasAccess(
            queue.getName(), QueueOperation.SUBMIT_JOB, self._user, self._groups
        )
        mark_style = (
            CFG.queues_presenter.available_mark_style
            if available
            else CFG.queues_presenter.unavailable_mark_style
        )
        text_style = CFG.queues_presenter.main_text_style

        acls = []
        for operation in QueueOperation:
            acl = queue.getAcl(operation)
            acls.append(Text(str(acl) if acl is not None else "", style=text_style))

        table.add_row(
            Text(CFG.queues_presenter.main_mark, style=mark_style),
            Text(queue.getName(), style=text_style),
            Text(str(queue.getState()), style=queue.getState().color),
            *acls,
        )

    def _createNotes(self) -> Text:
        """
        Describe whether ACLs are enforced.
        """
        enforced = "enforced" if self._parser.isAclsEnabled() else "not enforced"
        return Text(
            f"{len(self._queues)} queue(s), ACLs {enforced}, shown for user '{self._user}'",
            style=CFG.queues_presenter.notes_style,
        )
