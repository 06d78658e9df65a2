# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.domain.admins.repositories import AdminRepository
from invoicer.shared.config import load_config
from invoicer.shared.logging import logger


class AdminSetupError(Exception):
    pass


def setup_admin_user(admins: AdminRepository) -> None:
    """Create the configured admin account when it does not exist yet."""
    config = load_config()

    if not config.admin_username or not config.admin_password:
        logger.info("admin_setup: ADMIN_USERNAME/ADMIN_PASSWORD not configured, skipping")
        return

    if admins.find_by_username(config.admin_username) is not None:
        logger.info(f"admin_setup: admin '{config.admin_username}' already exists")
        return

    try:
        admins.add(config.admin_username, config.admin_password)
    except Exception as e:
        logger.error(f"admin_setup: failed to create admin: {e}")
        raise AdminSetupError(f"Failed to create admin user: {e}") from e
    logger.info(f"admin_setup: created admin '{config.admin_username}'")


__all__ = ["AdminSetupError", "setup_admin_user"]
