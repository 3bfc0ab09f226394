import logging

from hearts_engine.engine import HeartsRound

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    hearts_round = HeartsRound.deal(random_state=24)
    for player_idx, hand in enumerate(hearts_round.hands):
        print(f'Player {player_idx + 1}: {", ".join(str(card) for card in hand)}')

    while (player_idx := hearts_round.whose_turn()) is not None:
        if len(hearts_round.in_play) == 0:
            print()
            print(f'Trick {hearts_round.trick_no}:')

        choices = hearts_round.legal_plays(player_idx)
        print(f'  Player {player_idx + 1}: {choices[0]} <- {choices}')
        hearts_round.play(player_idx, choices[0])

    print()
    print('Round score:')
    for player_idx, score in enumerate(hearts_round.score()):
        print(f'  Player {player_idx + 1}: {score}')
