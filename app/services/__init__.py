from app.services.depth_charts import AssignmentService, player_assignments
from app.services.players import (
    create_player, delete_player, get_player, list_players, parse_player_form,
    players_for_unit, search_players, update_player,
)
from app.services.users import (
    change_password, create_user, get_user_by_email, get_user_by_id, list_users,
    seed_users, update_user_role, verify_login,
)
