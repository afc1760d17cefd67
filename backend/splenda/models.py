from splenda import db
from splenda.services.games.constants import Color, GameState


def _enum(enum_cls, name):
    # Store the lowercase values, not the member names.
    return db.Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


color_enum = _enum(Color, 'color')
game_state_enum = _enum(GameState, 'game_state')


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.String(64), primary_key=True)
    version = db.Column(db.Integer, nullable=False, default=0)
    state = db.Column(game_state_enum, nullable=False, default=GameState.PLAYING)
    current = db.Column(db.String(256), nullable=False)

    coins = db.relationship('GameCoin', cascade='all, delete-orphan')
    nobles = db.relationship('GameNoble', cascade='all, delete-orphan')
    cards = db.relationship('GameCard', cascade='all, delete-orphan')
    deck = db.relationship('GameDeckCard', cascade='all, delete-orphan')
    players = db.relationship('Player', cascade='all, delete-orphan',
                              order_by='Player.position')
    player_coins = db.relationship('PlayerCoin', cascade='all, delete-orphan')
    player_nobles = db.relationship('PlayerNoble', cascade='all, delete-orphan')
    player_cards = db.relationship('PlayerCard', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Game {self.id} v{self.version} {self.state.value}>'


class GameCoin(db.Model):
    """Coins of one color in a game's bank."""
    __tablename__ = 'game_coin'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    color = db.Column(color_enum, primary_key=True)
    count = db.Column(db.Integer, nullable=False)


class GameNoble(db.Model):
    __tablename__ = 'game_noble'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    position = db.Column(db.Integer, primary_key=True)
    noble_id = db.Column(db.String(64), nullable=False)


class GameCard(db.Model):
    """A face-up card on the table. A missing row is an empty slot."""
    __tablename__ = 'game_card'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    tier = db.Column(db.Integer, primary_key=True)
    position = db.Column(db.Integer, primary_key=True)
    card_id = db.Column(db.String(64), nullable=False)


class GameDeckCard(db.Model):
    """An undealt card; the lowest position in a tier is the top of the deck."""
    __tablename__ = 'game_deck'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    tier = db.Column(db.Integer, primary_key=True)
    position = db.Column(db.Integer, primary_key=True)
    card_id = db.Column(db.String(64), nullable=False)


class Player(db.Model):
    __tablename__ = 'player'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    user_id = db.Column(db.String(256), primary_key=True, index=True)
    position = db.Column(db.Integer, nullable=False)  # turn order


class PlayerCoin(db.Model):
    __tablename__ = 'player_coin'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    user_id = db.Column(db.String(256), primary_key=True)
    color = db.Column(color_enum, primary_key=True)
    count = db.Column(db.Integer, nullable=False, default=0)


class PlayerNoble(db.Model):
    __tablename__ = 'player_noble'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    user_id = db.Column(db.String(256), primary_key=True)
    noble_id = db.Column(db.String(64), primary_key=True)


class PlayerCard(db.Model):
    """A card a player owns, or holds in reserve when ``reserved`` is set."""
    __tablename__ = 'player_card'
    game_id = db.Column(db.String(64), db.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)
    user_id = db.Column(db.String(256), primary_key=True)
    card_id = db.Column(db.String(64), primary_key=True)
    reserved = db.Column(db.Boolean, nullable=False, default=False)
    sequence = db.Column(db.Integer, nullable=False)
