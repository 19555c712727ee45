"""User profile, role and permission models."""

from enum import StrEnum

USER_PROFILE_DDL = """
CREATE TABLE IF NOT EXISTS user_profile (
    user_profile_id BIGINT PRIMARY KEY,
    auth_id VARCHAR NOT NULL UNIQUE,
    display_name VARCHAR
)
"""

USER_ROLE_DDL = """
CREATE TABLE IF NOT EXISTS user_role (
    user_role_id BIGINT PRIMARY KEY,
    role_name VARCHAR NOT NULL UNIQUE
)
"""

USER_ROLE_PERMISSION_DDL = """
CREATE TABLE IF NOT EXISTS user_role_permission (
    user_role_id BIGINT NOT NULL,
    permission VARCHAR NOT NULL,
    PRIMARY KEY (user_role_id, permission)
)
"""

USER_PROFILE_ROLE_DDL = """
CREATE TABLE IF NOT EXISTS user_profile_role (
    user_profile_id BIGINT NOT NULL,
    user_role_id BIGINT NOT NULL,
    PRIMARY KEY (user_profile_id, user_role_id)
)
"""


class Permission(StrEnum):
    """Admin permissions granted through roles."""

    ACCESS_ADMIN = "ACCESS_ADMIN"
    MANAGE_FEATURED_ARTICLES = "MANAGE_FEATURED_ARTICLES"
    MANAGE_CACHES = "MANAGE_CACHES"
