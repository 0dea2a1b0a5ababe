"""Create account, invite and leader_profile tables

Revision ID: 3f9a1c2b7d10
Revises: 
Create Date: 2026-01-12 10:14:02.118403

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a1c2b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # account <-> invite reference each other; the account side FK is added last
    op.create_table('account',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('mobile', sa.String(10), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('state', sa.String(100), nullable=True),
        sa.Column('district', sa.String(100), nullable=True),
        sa.Column('constituency', sa.String(150), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('can_post', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('used_invite_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('mobile'),
        sa.UniqueConstraint('used_invite_id')
    )

    op.create_table('invite',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(32), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('used', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('created_by_id', sa.Integer(), nullable=True),
        sa.Column('used_by_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['created_by_id'], ['account.id'], name='fk_invite_created_by_id'),
        sa.ForeignKeyConstraint(['used_by_id'], ['account.id'], name='fk_invite_used_by_id'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code')
    )

    op.create_table('leader_profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(120), nullable=False),
        sa.Column('designation', sa.String(100), nullable=False),
        sa.Column('constituency', sa.String(150), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('photo_url', sa.String(500), nullable=True),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('verified', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['account_id'], ['account.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('account_id'),
        sa.UniqueConstraint('slug')
    )

    with op.batch_alter_table('account') as batch_op:
        batch_op.create_foreign_key('fk_account_used_invite_id', 'invite',
                                    ['used_invite_id'], ['id'])


def downgrade():
    with op.batch_alter_table('account') as batch_op:
        batch_op.drop_constraint('fk_account_used_invite_id', type_='foreignkey')

    op.drop_table('leader_profile')
    op.drop_table('invite')
    op.drop_table('account')
