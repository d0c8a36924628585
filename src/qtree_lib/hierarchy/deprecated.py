# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from qtree_lib.conf.configuration import Configuration
from qtree_lib.core.config import CFG
from qtree_lib.core.logger import get_logger
from qtree_lib.properties.acl import AccessControlList
from qtree_lib.properties.operations import QueueOperation
from qtree_lib.properties.states import QueueState

from .names import toFullPropertyName
from .parser import QueueConfigurationParser
from .queue import Queue

logger = get_logger(__name__)


class DeprecatedQueueConfigurationParser(QueueConfigurationParser):
    """
    Builds a single-level queue hierarchy from the deprecated flat queue properties
    (`mapred.queue.names`, `mapred.queue.<name>.acl-*`, `mapred.queue.<name>.state`).

    If the configuration does not define `mapred.queue.names`, nothing is built
    and `getRoot` returns None.
    """

    def __init__(self, conf: Configuration):
        """
        Build the queue hierarchy from the configuration.

        Args:
            conf (Configuration): Snapshot of the flat configuration properties.
        """
        super().__init__()

        if not self._deprecatedConf(conf):
            logger.debug("No deprecated queue configuration found.")
            return

        queues = self._createQueues(conf)
        self.setAclsEnabled(conf.getBoolean(CFG.legacy_keys.acls_enabled, False))

        root = Queue("")
        for queue in queues:
            root.addChild(queue)
        self.root = root

    def _createQueues(self, conf: Configuration) -> list[Queue]:
        """
        Create one queue per name listed in `mapred.queue.names`.

        Queues that cannot be initialized are skipped. A repeated name is
        skipped as well, keeping the first occurrence.
        """
        queues = []
        seen: set[str] = set()
        for name in conf.getStrings(CFG.legacy_keys.queue_names) or []:
            if name in seen:
                logger.warning(f"Queue '{name}' is listed more than once. Ignoring the repeat.")
                continue
            seen.add(name)

            try:
                acls = self._getQueueAcls(name, conf)
                state = self._getQueueState(name, conf)
                queues.append(Queue(name, acls, state))
                logger.debug(f"Initialized queue '{name}' ({state}).")
            except Exception as e:
                logger.warning(f"Not able to initialize queue '{name}': {e}")

        return queues

    @staticmethod
    def _getQueueState(name: str, conf: Configuration) -> QueueState:
        state = conf.get(
            toFullPropertyName(name, CFG.legacy_keys.state),
            QueueState.RUNNING.stateName,
        )
        return QueueState.fromStr(state)

    @staticmethod
    def _getQueueAcls(name: str, conf: Configuration) -> dict[str, AccessControlList]:
        """
        Parse the ACLs of the queue, one for each queue operation.
        Unset ACLs allow everyone.
        """
        acls = {}
        for operation in QueueOperation:
            key = toFullPropertyName(name, operation.aclName)
            value = conf.get(key)
            acls[key] = (
                AccessControlList(value)
                if value is not None
                else AccessControlList.default()
            )

        return acls

    @staticmethod
    def _deprecatedConf(conf: Configuration) -> bool:
        """
        Check whether queues are configured using the deprecated properties.
        If they are, log deprecation warnings.

        Returns:
            bool: True if `mapred.queue.names` is set, False otherwise.
        """
        keys = CFG.legacy_keys
        if conf.get(keys.queue_names) is None:
            return False

        logger.warning(
            f"Configuring '{keys.queue_names}' in mapred-site.xml or hadoop-site.xml is deprecated. "
            f"Configure queue hierarchy in '{keys.queue_conf_file}'."
        )

        if conf.get(keys.acls_enabled) is not None:
            logger.warning(
                f"Configuring '{keys.acls_enabled}' in mapred-site.xml or hadoop-site.xml is deprecated. "
                f"Configure queue hierarchy in '{keys.queue_conf_file}'."
            )

        for name in conf.getStrings(keys.queue_names) or []:
            for operation in QueueOperation:
                if conf.get(toFullPropertyName(name, operation.aclName)) is not None:
                    logger.warning(
                        "Configuring queue ACLs in mapred-site.xml or hadoop-site.xml is deprecated. "
                        f"Configure queue ACLs in '{keys.queue_conf_file}'."
                    )
                    # a single warning is enough
                    return True

        return True
