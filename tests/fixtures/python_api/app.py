"""Tiny service used by the python-language tests."""

# @Summary List users
# @Tags users
# @Param limit query int false maximum number of users
# @Success 200 {array} User list of users
# @Router /users get
def list_users(limit=10):
    marker = "# @Summary this is a string, not a comment"
    return marker[:limit]
