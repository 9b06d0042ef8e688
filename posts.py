from flask import Blueprint

from database import DatabaseError, Fetch, execute
from pydantic_schemas import Post
from utils.clock import to_instant_string, utcnow
from utils.http import json_response, parse_body, text_response
from utils.logger import get_logger

logger = get_logger(__name__)

posts_blueprint = Blueprint('posts', __name__)

ACTIVE = 'active'
MISSING_FIELDS_MESSAGE = 'Missing required fields: userId, type, title, lat, lng'

# user_id, status and username are not selected, so listed posts leave them null.
SELECT_POSTS_SQL = "SELECT id, type, title, description, contact, lat, lng, created_at FROM posts"
INSERT_POST_SQL = (
    "INSERT INTO posts (user_id, type, title, description, lat, lng, contact, status, created_at) "
    "VALUES (:user_id, :type, :title, :description, :lat, :lng, :contact, :status, :created_at) "
    "RETURNING id"
)


@posts_blueprint.route('', methods=['GET'])
def get_all_posts():
    """Returns every post in whatever order the store produces them."""
    try:
        rows = execute(SELECT_POSTS_SQL, fetch=Fetch.ROWS)
    except DatabaseError as e:
        logger.exception("Failed to fetch posts")
        return text_response(f'DB error: {e}', 500)

    return json_response([Post.from_row(row) for row in rows])


@posts_blueprint.route('', methods=['POST'])
def create_post():
    """
    Creates an active post stamped with the server time.
    The input is echoed back with its generated id and createdAt.
    """
    post = parse_body(Post)
    if post is None or post.missing_required():
        return text_response(MISSING_FIELDS_MESSAGE, 400)

    post.description = post.description if post.description is not None else ''
    post.contact = post.contact if post.contact is not None else ''
    post.status = ACTIVE
    now = utcnow()

    try:
        post.id = execute(
            INSERT_POST_SQL,
            {
                "user_id": post.user_id,
                "type": post.type,
                "title": post.title,
                "description": post.description,
                "lat": post.lat,
                "lng": post.lng,
                "contact": post.contact,
                "status": post.status,
                "created_at": now,
            },
            fetch=Fetch.GENERATED_ID,
        )
    except DatabaseError as e:
        logger.exception("Error creating post for user %s", post.user_id)
        return text_response(f'DB error: {e}', 500)

    post.created_at = to_instant_string(now)
    logger.info("Created post #%s (%s) for user %s", post.id, post.type, post.user_id)
    return json_response(post, 201)
