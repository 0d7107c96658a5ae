from quizmo.services.auth.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from quizmo.services.auth.service import (
    register_user,
    authenticate_user,
    get_current_user,
    get_user_by_id,
)
