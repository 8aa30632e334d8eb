from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

import numpy as np

from games.color_shooter.cluster import TargetCluster
from games.color_shooter.const import HIT_DISTANCE
from games.color_shooter.session import Session
from games.color_shooter.shooter import Projectile, Shooter

logger = logging.getLogger(__name__)


class Outcome(Enum):
    Nothing = 0
    Match = 1
    Mismatch = 2


def first_hit(projectile: Projectile, cluster: TargetCluster,
              threshold: float = HIT_DISTANCE) -> Optional[int]:
    """Index of the first target (cluster order) closer than threshold, or None."""
    pos = cluster.positions()
    if not len(pos):
        return None
    dist = np.hypot(pos[:, 0] - projectile.x, pos[:, 1] - projectile.y)
    hits = np.flatnonzero(dist < threshold)
    return int(hits[0]) if hits.size else None


def resolve(session: Session, cluster: TargetCluster, shooter: Shooter) -> Outcome:
    """
    Resolve the in-flight projectile against the cluster, at most one target
    per call. Level clearing is left to the caller.
    """
    p = shooter.projectile
    if p is None:
        return Outcome.Nothing

    idx = first_hit(p, cluster)
    if idx is None:
        return Outcome.Nothing

    target = cluster.targets[idx]
    if target.color == p.color:
        cluster.remove_at(idx)
        session.award_hit()
        shooter.clear()
        logger.debug("hit %s target #%d, score %d", target.color, idx, session.score)
        return Outcome.Match

    logger.debug("%s shot hit %s target #%d", p.color, target.color, idx)
    if not session.lose_life():
        shooter.clear()
    # on game over the shot stays where it hit, frozen with the rest of the scene
    return Outcome.Mismatch
