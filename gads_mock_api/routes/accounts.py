"""
Account routes - list accounts, get account, list campaigns / ad groups / keywords.

Industry is internal to generation and is never part of a response.
"""

from flask import Blueprint, g, jsonify

from gads_mock.errors import EntityNotFoundError
from gads_mock_api.auth import with_auth_status
from gads_mock_api.routes.shared import get_structure_cache, require_account, require_structure

bp = Blueprint('accounts', __name__)


@bp.route("/accounts", methods=["GET"])
@with_auth_status
def list_accounts():
    """
    List all seed accounts.

    Returns JSON:
        {"authentication": {...}, "accounts": [{id, name, currencyCode, timezone}, ...]}
    """
    accounts = [a.to_dict() for a in get_structure_cache().list_accounts()]
    return jsonify({"authentication": g.auth_status, "accounts": accounts})


@bp.route("/accounts/<account_id>", methods=["GET"])
@with_auth_status
def get_account(account_id: str):
    """
    Get one account.

    Returns JSON:
        {"authentication": {...}, "id", "name", "currencyCode", "timezone"}
    """
    account = require_account(account_id)
    return jsonify({"authentication": g.auth_status, **account.to_dict()})


@bp.route("/accounts/<account_id>/campaigns", methods=["GET"])
@with_auth_status
def list_campaigns(account_id: str):
    """
    List the generated campaigns of an account (all statuses).

    Returns JSON:
        {"authentication": {...}, "campaigns": [...]}
    """
    require_account(account_id)
    campaigns = [c.to_dict() for c in get_structure_cache().get_campaigns(account_id)]
    return jsonify({"authentication": g.auth_status, "campaigns": campaigns})


@bp.route("/accounts/<account_id>/campaigns/<campaign_id>/ad-groups", methods=["GET"])
@with_auth_status
def list_ad_groups(account_id: str, campaign_id: str):
    """
    List the ad groups of one campaign.

    Returns JSON:
        {"authentication": {...}, "adGroups": [...]}
    """
    structure = require_structure(account_id)
    if structure.campaign_by_id(campaign_id) is None:
        raise EntityNotFoundError("Campaign", campaign_id)

    ad_groups = [ag.to_dict() for ag in structure.ad_groups_for_campaign(campaign_id)]
    return jsonify({"authentication": g.auth_status, "adGroups": ad_groups})


@bp.route("/accounts/<account_id>/ad-groups/<ad_group_id>/keywords", methods=["GET"])
@with_auth_status
def list_keywords(account_id: str, ad_group_id: str):
    """
    List the keywords of one ad group.

    Returns JSON:
        {"authentication": {...}, "keywords": [...]}
    """
    structure = require_structure(account_id)
    if structure.ad_group_by_id(ad_group_id) is None:
        raise EntityNotFoundError("Ad group", ad_group_id)

    keywords = [kw.to_dict() for kw in structure.keywords_for_ad_group(ad_group_id)]
    return jsonify({"authentication": g.auth_status, "keywords": keywords})
