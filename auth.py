from flask import Blueprint

from database import DatabaseError, Fetch, execute
from pydantic_schemas import AuthRequest, User
from utils.clock import utcnow
from utils.http import json_response, parse_body, text_response
from utils.logger import get_logger

logger = get_logger(__name__)

auth_blueprint = Blueprint('auth', __name__)

INSERT_USER_SQL = (
    "INSERT INTO users (username, email, password, phone, rating, rating_count, created_at) "
    "VALUES (:username, :email, :password, :phone, :rating, :rating_count, :created_at) RETURNING id"
)
SELECT_USER_BY_CREDENTIALS_SQL = (
    "SELECT id, username, email, phone, rating, rating_count "
    "FROM users WHERE email = :email AND password = :password"
)


# ==================================
# User Registration Endpoint
# ==================================
@auth_blueprint.route('/register', methods=['POST'])
def register():
    """Creates a user with a zero rating and returns it with its generated id."""
    req = parse_body(AuthRequest) or AuthRequest()

    if req.email is None or req.password is None or req.username is None:
        return text_response('Missing required fields', 400)

    user = User(
        username=req.username,
        email=req.email,
        password=req.password,
        phone=req.phone if req.phone is not None else '',
        rating=0.0,
        rating_count=0,
    )
    try:
        user.id = execute(
            INSERT_USER_SQL,
            {
                "username": user.username,
                "email": user.email,
                "password": user.password,
                "phone": user.phone,
                "rating": user.rating,
                "rating_count": user.rating_count,
                "created_at": utcnow(),
            },
            fetch=Fetch.GENERATED_ID,
        )
    except DatabaseError as e:
        logger.exception("Registration failed for %s", req.email)
        return text_response(f'Registration failed: {e}', 500)

    logger.info("Registered user #%s (%s)", user.id, user.username)
    return json_response(user, 201)


# ==================================
# User Login Endpoint
# ==================================
@auth_blueprint.route('/login', methods=['POST'])
def login():
    """Looks the user up by exact email and password."""
    req = parse_body(AuthRequest) or AuthRequest()

    if req.email is None or req.password is None:
        return text_response('Missing email or password', 400)

    try:
        rows = execute(
            SELECT_USER_BY_CREDENTIALS_SQL,
            {"email": req.email, "password": req.password},
            fetch=Fetch.ROWS,
        )
    except DatabaseError as e:
        logger.exception("Login failed for %s", req.email)
        return text_response(f'Login Failed: {e}', 500)

    if not rows:
        return text_response('Invalid email or password', 401)

    # Several rows can match; the first one from the cursor wins.
    return json_response(User.from_row(rows[0]))
